"""
Record shapes accepted by the repositories.

Every field is optional so the same model serves create, load and partial
update: `model_dump(exclude_unset=True)` yields only the fields a caller
actually supplied. Enum and NOT NULL rules are left to the database.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class RecordData(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')

    id: Optional[str] = None

class CustomerData(RecordData):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    gender: Optional[str] = None
    visit_count: Optional[int] = None
    total_spent: Optional[float] = None
    last_visit: Optional[str] = None
    preferred_services: Optional[List[str]] = None
    notes: Optional[str] = None
    photo: Optional[str] = None

class WorkingHours(BaseModel):
    model_config = ConfigDict(extra='ignore')

    start: Optional[str] = None
    end: Optional[str] = None

class EmployeeData(RecordData):
    name: Optional[str] = None
    role: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    photo: Optional[str] = None
    available: Optional[bool] = None
    specialties: Optional[List[str]] = None
    rating: Optional[float] = None
    next_available: Optional[str] = None
    working_hours: Optional[WorkingHours] = None

class ServiceData(RecordData):
    name: Optional[str] = None
    duration: Optional[int] = None
    price: Optional[float] = None
    category: Optional[str] = None
    description: Optional[str] = None

class AppointmentData(RecordData):
    customer_id: Optional[str] = None
    employee_id: Optional[str] = None
    service_ids: Optional[List[str]] = None
    date: Optional[str] = None
    time: Optional[str] = None
    status: Optional[str] = None
    total: Optional[float] = None
    notes: Optional[str] = None

class TallyItemData(RecordData):
    date: Optional[str] = None
    time: Optional[str] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    staff_name: Optional[str] = None
    services: Optional[List[Any]] = None
    total_cost: Optional[float] = None
    payment_method: Optional[str] = None
    payment_status: Optional[str] = None
    payment_date: Optional[str] = None
    upi_transaction_id: Optional[str] = None

class ProductData(RecordData):
    name: Optional[str] = None
    price: Optional[float] = None
    image: Optional[str] = None
    category: Optional[str] = None
    stock: Optional[int] = None
    description: Optional[str] = None
    brand: Optional[str] = None
