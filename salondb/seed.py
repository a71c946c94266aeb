import logging

logger = logging.getLogger(__name__)

def seed_if_empty(store, provider=None):
    """
    Loads the initial dataset when the customers table is empty.
    Returns True if rows were inserted, False if the database already had data.
    """
    if store.customers.count() > 0:
        return False

    if provider is None:
        from salondb.seed_data import load_seed_data
        provider = load_seed_data

    logger.info("Inserting initial data...")
    data = provider()

    for customer in data.get('customers', []):
        store.customers.load(customer)

    for employee in data.get('employees', []):
        # Contact details are not part of the seed set
        store.employees.load({**employee, 'email': '', 'phone': ''})

    for service in data.get('services', []):
        store.services.load(service)

    for product in data.get('products', []):
        store.products.load(product)

    logger.info("Initial data inserted successfully")
    return True
