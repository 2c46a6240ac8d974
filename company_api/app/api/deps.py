"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from company_api.app.services.company_service import CompanyService


def get_company_service(request: Request) -> CompanyService:
    """Return the service instance wired up by ``create_app``."""
    return request.app.state.company_service
