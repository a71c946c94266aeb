import logging
from concurrent.futures import Future, ThreadPoolExecutor

from flask import current_app

from salondb.extensions import db
from salondb.repositories import (
    AppointmentRepository, CustomerRepository, EmployeeRepository,
    ProductRepository, ServiceRepository, TallyRepository,
)
from salondb.schema import ensure_schema
from salondb.seed import seed_if_empty

logger = logging.getLogger(__name__)

class SalonStore:
    """
    Handle on the salon database: one repository per table, all sharing a
    session. `ready` resolves once startup seeding has finished.
    """

    def __init__(self, session):
        self.session = session
        self.customers = CustomerRepository(session)
        self.employees = EmployeeRepository(session)
        self.services = ServiceRepository(session)
        self.appointments = AppointmentRepository(session)
        self.tally = TallyRepository(session)
        self.products = ProductRepository(session)
        self.ready = Future()

    def wait_ready(self, timeout=None):
        """Blocks until seeding is done. Re-raises any seeding failure."""
        return self.ready.result(timeout=timeout)

def _seed_in_context(app, store, provider):
    with app.app_context():
        return seed_if_empty(store, provider)

def _log_seed_failure(future):
    error = future.exception()
    if error is not None:
        logger.error("Seeding failed: %s", error)

def init_store(app, provider=None):
    """
    Creates the schema and schedules seeding on a worker thread.
    The returned store's `ready` future carries the seeding outcome.
    """
    store = SalonStore(db.session)
    app.extensions['salon_store'] = store

    with app.app_context():
        ensure_schema()

    if not app.config.get('SEED_ON_STARTUP', True):
        store.ready.set_result(False)
        return store

    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix='salon-seed')
    store.ready = executor.submit(_seed_in_context, app, store, provider)
    store.ready.add_done_callback(_log_seed_failure)
    executor.shutdown(wait=False)
    return store

def get_store(app=None):
    app = app or current_app
    return app.extensions['salon_store']
