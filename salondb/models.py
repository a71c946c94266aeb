import json
import uuid
from datetime import datetime

import pytz
from sqlalchemy.types import TypeDecorator

from salondb.extensions import db

def generate_id(prefix):
    return f"{prefix}-{uuid.uuid4()}"

def utcnow():
    """Naive UTC timestamp, the form SQLite DATETIME columns round-trip."""
    return datetime.now(pytz.utc).replace(tzinfo=None)

def utcnow_iso():
    return datetime.now(pytz.utc).isoformat()

class JSONText(TypeDecorator):
    """
    JSON array stored in a TEXT column.
    NULL or empty text reads back as an empty list; malformed text raises.
    """
    impl = db.Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return json.dumps(value, separators=(',', ':'))

    def process_result_value(self, value, dialect):
        if not value:
            return []
        return json.loads(value)

class TimestampMixin:
    created_at = db.Column(db.DateTime, default=utcnow, server_default=db.func.current_timestamp())
    updated_at = db.Column(db.DateTime, default=utcnow, server_default=db.func.current_timestamp())

class Customer(TimestampMixin, db.Model):
    __tablename__ = 'customers'

    id = db.Column(db.Text, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    phone = db.Column(db.Text, nullable=False, unique=True)
    email = db.Column(db.Text)
    gender = db.Column(db.Text, db.CheckConstraint("gender IN ('male', 'female')"), nullable=False)
    visit_count = db.Column(db.Integer, server_default=db.text('0'))
    total_spent = db.Column(db.Float, server_default=db.text('0'))
    last_visit = db.Column(db.Text)
    preferred_services = db.Column(JSONText)
    notes = db.Column(db.Text)
    photo = db.Column(db.Text)

class Employee(TimestampMixin, db.Model):
    __tablename__ = 'employees'

    id = db.Column(db.Text, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    role = db.Column(db.Text, nullable=False)
    email = db.Column(db.Text)
    phone = db.Column(db.Text)
    photo = db.Column(db.Text)
    available = db.Column(db.Boolean, server_default=db.text('1'))
    specialties = db.Column(JSONText)
    rating = db.Column(db.Float, server_default=db.text('5.0'))
    next_available = db.Column(db.Text)
    working_hours_start = db.Column(db.Text, server_default='09:00')
    working_hours_end = db.Column(db.Text, server_default='18:00')

class Service(TimestampMixin, db.Model):
    __tablename__ = 'services'

    id = db.Column(db.Text, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    duration = db.Column(db.Integer, nullable=False)
    price = db.Column(db.Float, nullable=False)
    category = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text)

class Appointment(TimestampMixin, db.Model):
    __tablename__ = 'appointments'

    id = db.Column(db.Text, primary_key=True)
    customer_id = db.Column(db.Text, db.ForeignKey('customers.id'), nullable=False)
    employee_id = db.Column(db.Text, db.ForeignKey('employees.id'), nullable=False)
    service_ids = db.Column(JSONText, nullable=False)
    date = db.Column(db.Text, nullable=False)
    time = db.Column(db.Text, nullable=False)
    status = db.Column(
        db.Text,
        db.CheckConstraint("status IN ('scheduled', 'completed', 'cancelled')"),
        server_default='scheduled',
    )
    total = db.Column(db.Float, nullable=False)
    notes = db.Column(db.Text)

class TallyItem(TimestampMixin, db.Model):
    __tablename__ = 'tally_items'

    id = db.Column(db.Text, primary_key=True)
    date = db.Column(db.Text, nullable=False)
    time = db.Column(db.Text, nullable=False)
    customer_name = db.Column(db.Text, nullable=False)
    customer_phone = db.Column(db.Text, nullable=False)
    staff_name = db.Column(db.Text, nullable=False)
    services = db.Column(JSONText, nullable=False)
    total_cost = db.Column(db.Float, nullable=False)
    payment_method = db.Column(
        db.Text,
        db.CheckConstraint("payment_method IN ('cash', 'card', 'upi')"),
        nullable=False,
    )
    payment_status = db.Column(
        db.Text,
        db.CheckConstraint("payment_status IN ('pending', 'completed', 'failed', 'cancelled')"),
        server_default='pending',
    )
    payment_date = db.Column(db.Text)
    upi_transaction_id = db.Column(db.Text)

class Product(TimestampMixin, db.Model):
    __tablename__ = 'products'

    id = db.Column(db.Text, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    price = db.Column(db.Float, nullable=False)
    image = db.Column(db.Text)
    category = db.Column(db.Text, nullable=False)
    stock = db.Column(db.Integer, server_default=db.text('0'))
    description = db.Column(db.Text)
    brand = db.Column(db.Text)
