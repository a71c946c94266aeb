import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from salondb.models import (
    Appointment, Customer, Employee, Product, Service, TallyItem,
    generate_id, utcnow, utcnow_iso,
)
from salondb.schemas import (
    AppointmentData, CustomerData, EmployeeData, ProductData, ServiceData, TallyItemData,
)

logger = logging.getLogger(__name__)

def _isoformat(value):
    return value.isoformat() if value else None

class Repository:
    """
    CRUD over one table. Records go in and come out as camelCase dicts;
    every read goes to the database, nothing is cached here.
    """
    model = None
    schema = None
    order_by = ()

    def __init__(self, session):
        self.session = session

    @contextmanager
    def _transaction(self):
        try:
            yield
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    def _parse(self, data, **dump_options):
        if not isinstance(data, self.schema):
            data = self.schema.model_validate(data)
        return data.model_dump(**dump_options)

    def _columns(self, fields):
        """Map schema field names onto model column attributes."""
        return dict(fields)

    def _to_record(self, row):
        raise NotImplementedError

    def _timestamps(self, row):
        return {
            'createdAt': _isoformat(row.created_at),
            'updatedAt': _isoformat(row.updated_at),
        }

    def count(self):
        return self.session.query(self.model).count()

    def get_all(self):
        rows = self.session.query(self.model).order_by(*self.order_by).all()
        return [self._to_record(row) for row in rows]

    def get_by_id(self, id):
        row = self.session.get(self.model, id)
        if row is None:
            return None
        return self._to_record(row)

    def load(self, record):
        """Insert a full record as given, keeping its id."""
        return self._insert(self._parse(record))

    def _insert(self, fields):
        columns = {key: value for key, value in self._columns(fields).items() if value is not None}
        row = self.model(**columns)
        with self._transaction():
            self.session.add(row)
        return self._to_record(row)

    def create(self, data):
        return self.load(data)

    def update(self, id, partial):
        values = self._columns(self._parse(partial, exclude_unset=True, exclude={'id'}))
        values['updated_at'] = utcnow()
        with self._transaction():
            self.session.query(self.model).filter_by(id=id).update(values)

    def delete(self, id):
        with self._transaction():
            self.session.query(self.model).filter_by(id=id).delete()

class CustomerRepository(Repository):
    model = Customer
    schema = CustomerData
    order_by = (Customer.name,)

    def _to_record(self, row):
        return {
            'id': row.id,
            'name': row.name,
            'phone': row.phone,
            'email': row.email,
            'gender': row.gender,
            'visitCount': row.visit_count,
            'totalSpent': row.total_spent,
            'lastVisit': row.last_visit,
            'preferredServices': row.preferred_services,
            'notes': row.notes,
            'photo': row.photo,
            **self._timestamps(row),
        }

    def create(self, data):
        fields = self._parse(data)
        fields.update(
            id=generate_id('cust'),
            visit_count=0,
            total_spent=0,
            last_visit=utcnow_iso(),
        )
        if fields['preferred_services'] is None:
            fields['preferred_services'] = []
        if fields['notes'] is None:
            fields['notes'] = ''
        return self._insert(fields)

class EmployeeRepository(Repository):
    model = Employee
    schema = EmployeeData
    order_by = (Employee.name,)

    def _columns(self, fields):
        columns = dict(fields)
        # workingHours is nested in the record but stored as two columns
        hours = columns.pop('working_hours', None) or {}
        if 'start' in hours:
            columns['working_hours_start'] = hours['start']
        if 'end' in hours:
            columns['working_hours_end'] = hours['end']
        return columns

    def _to_record(self, row):
        return {
            'id': row.id,
            'name': row.name,
            'role': row.role,
            'email': row.email,
            'phone': row.phone,
            'photo': row.photo,
            'available': bool(row.available),
            'specialties': row.specialties,
            'rating': row.rating,
            'nextAvailable': row.next_available,
            'workingHours': {
                'start': row.working_hours_start,
                'end': row.working_hours_end,
            },
            **self._timestamps(row),
        }

    def create(self, data):
        fields = self._parse(data)
        hours = fields['working_hours'] or {}
        defaults = {
            'email': '',
            'phone': '',
            'available': True,
            'specialties': [],
            'rating': 5.0,
            'next_available': 'Now',
        }
        for key, value in defaults.items():
            if fields[key] is None:
                fields[key] = value
        fields['working_hours'] = {
            'start': hours.get('start') or '09:00',
            'end': hours.get('end') or '18:00',
        }
        fields['id'] = generate_id('emp')
        return self._insert(fields)

class ServiceRepository(Repository):
    model = Service
    schema = ServiceData
    order_by = (Service.name,)

    def _to_record(self, row):
        return {
            'id': row.id,
            'name': row.name,
            'duration': row.duration,
            'price': row.price,
            'category': row.category,
            'description': row.description,
            **self._timestamps(row),
        }

class AppointmentRepository(Repository):
    model = Appointment
    schema = AppointmentData
    order_by = (Appointment.date, Appointment.time)

    def _to_record(self, row):
        return {
            'id': row.id,
            'customerId': row.customer_id,
            'employeeId': row.employee_id,
            'serviceIds': row.service_ids,
            'date': row.date,
            'time': row.time,
            'status': row.status,
            'total': row.total,
            'notes': row.notes,
            **self._timestamps(row),
        }

    def create(self, data):
        fields = self._parse(data)
        if fields['notes'] is None:
            fields['notes'] = ''
        return self._insert(fields)

class TallyRepository(Repository):
    model = TallyItem
    schema = TallyItemData
    order_by = (TallyItem.date.desc(), TallyItem.time.desc())

    def _to_record(self, row):
        return {
            'id': row.id,
            'date': row.date,
            'time': row.time,
            'customerName': row.customer_name,
            'customerPhone': row.customer_phone,
            'staffName': row.staff_name,
            'services': row.services,
            'totalCost': row.total_cost,
            'paymentMethod': row.payment_method,
            'paymentStatus': row.payment_status,
            'paymentDate': row.payment_date,
            'upiTransactionId': row.upi_transaction_id,
            **self._timestamps(row),
        }

    def create(self, data):
        fields = self._parse(data)
        fields.update(
            id=generate_id('tally'),
            payment_date=utcnow_iso(),
            upi_transaction_id=None,
        )
        return self._insert(fields)

    def update_payment_status(self, id, status, upi_transaction_id=None):
        """Move a sale to a new payment state, recording the UPI reference if any."""
        values = {
            'payment_status': status,
            'upi_transaction_id': upi_transaction_id,
            'updated_at': utcnow(),
        }
        with self._transaction():
            self.session.query(TallyItem).filter_by(id=id).update(values)
        logger.debug("Tally item %s payment status set to %s", id, status)

class ProductRepository(Repository):
    model = Product
    schema = ProductData
    order_by = (Product.name,)

    def _to_record(self, row):
        return {
            'id': row.id,
            'name': row.name,
            'price': row.price,
            'image': row.image,
            'category': row.category,
            'stock': row.stock,
            'description': row.description,
            'brand': row.brand,
            **self._timestamps(row),
        }
