"""Pydantic schemas for dashboard and report statistics."""

from pydantic import BaseModel


class DashboardStats(BaseModel):
    total_clients: int
    appointments_today: int
    monthly_revenue: float
    completed_services_count: int


class ReportStats(BaseModel):
    total_clients: int
    completed_appointments: int
    active_services: int
    total_products: int


class ServiceCount(BaseModel):
    service_name: str
    count: int


class MonthlyClosing(BaseModel):
    """Month-closing summary shown on the first sheet of the general report."""
    year: int
    month: int
    revenue: float
    services_performed: int
    average_ticket: float
    total_appointments: int
    completed_appointments: int
    completion_rate: float
    canceled_appointments: int
    top_services: list[ServiceCount]
    total_clients: int
    clients_served: int


class MonthRevenue(BaseModel):
    month: int
    revenue: float
