# Routes package init
"""
Wedding Planner Backend — API Routes Package
==============================================

What:  HTTP route handlers, one module per resource.

Route Inventory:
    - users.py:         POST /adduser, GET /users/{id}, POST /login
    - services.py:      POST /addservice, GET /services, GET /services/{userId},
                        DELETE /services/{id}
    - appointments.py:  POST/GET /appointments, GET /appointments/client/{id},
                        GET /appointments/vendor/{id},
                        PATCH /appointments/{id}/status, DELETE /appointments/{id}
    - bookings.py:      POST /addbooking, GET /bookings/{user_id},
                        GET /vendor_bookings/{userId}, PATCH /bookings/{id}/status
    - payments.py:      POST /payments
    - wedding_plans.py: POST /wedding_plans, GET /wedding_plans/{user_id}
    - health.py:        GET /health

Routes stay thin: parse path and body, call the service, pick the status
code. Path ids are declared as int, so a non-numeric id is rejected with 400
before any query runs.
"""
