# Services package init
"""
Wedding Planner Backend — Services Layer
==========================================

What:  Business rules sitting between routes (HTTP) and repositories (SQL).
How:   Each service is a stateless singleton. Methods receive the request's
       AsyncSession, check required fields, call repositories, and raise
       application exceptions (ValidationError, NotFoundError, ...) that the
       global handlers translate into HTTP responses.

Service Inventory:
    - UserService:        registration, lookup, login
    - CatalogService:     vendor services and their priced subcategories
    - AppointmentService: client/vendor meetings
    - BookingService:     bookings and the enriched client/vendor booking views
    - PaymentService:     deposit records
    - WeddingPlanService: per-user checklists
"""
