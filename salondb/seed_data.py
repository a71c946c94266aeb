# Initial dataset loaded into an empty database

SERVICES = [
    {'id': 'svc-1', 'name': 'Haircut & Styling', 'duration': 45, 'price': 500.0, 'category': 'Hair',
     'description': 'Precision cut with wash and blow-dry'},
    {'id': 'svc-2', 'name': 'Hair Colour', 'duration': 120, 'price': 2500.0, 'category': 'Hair',
     'description': 'Global colour with ammonia-free products'},
    {'id': 'svc-3', 'name': 'Beard Trim', 'duration': 20, 'price': 200.0, 'category': 'Grooming',
     'description': 'Shape-up and trim with hot towel'},
    {'id': 'svc-4', 'name': 'Classic Facial', 'duration': 60, 'price': 1200.0, 'category': 'Skin',
     'description': 'Cleanse, exfoliate and hydrating mask'},
    {'id': 'svc-5', 'name': 'Manicure', 'duration': 40, 'price': 600.0, 'category': 'Nails',
     'description': 'Nail shaping, cuticle care and polish'},
    {'id': 'svc-6', 'name': 'Pedicure', 'duration': 50, 'price': 800.0, 'category': 'Nails',
     'description': 'Foot soak, scrub and polish'},
    {'id': 'svc-7', 'name': 'Head Massage', 'duration': 30, 'price': 400.0, 'category': 'Spa',
     'description': 'Warm oil head and shoulder massage'},
]

CUSTOMERS = [
    {'id': 'cust-1', 'name': 'Priya Sharma', 'phone': '9876543210', 'email': 'priya.sharma@example.com',
     'gender': 'female', 'visitCount': 12, 'totalSpent': 18400.0, 'lastVisit': '2024-03-02T11:30:00.000Z',
     'preferredServices': ['svc-2', 'svc-4'], 'notes': 'Prefers organic products', 'photo': None},
    {'id': 'cust-2', 'name': 'Rahul Verma', 'phone': '9812345678', 'email': 'rahul.verma@example.com',
     'gender': 'male', 'visitCount': 7, 'totalSpent': 4900.0, 'lastVisit': '2024-02-26T16:00:00.000Z',
     'preferredServices': ['svc-1', 'svc-3'], 'notes': '', 'photo': None},
    {'id': 'cust-3', 'name': 'Ananya Iyer', 'phone': '9900112233', 'email': 'ananya.iyer@example.com',
     'gender': 'female', 'visitCount': 3, 'totalSpent': 3600.0, 'lastVisit': '2024-02-18T10:15:00.000Z',
     'preferredServices': ['svc-5', 'svc-6'], 'notes': 'Allergic to acetone', 'photo': None},
    {'id': 'cust-4', 'name': 'Karan Mehta', 'phone': '9823456789', 'email': None,
     'gender': 'male', 'visitCount': 1, 'totalSpent': 500.0, 'lastVisit': '2024-01-30T18:45:00.000Z',
     'preferredServices': ['svc-1'], 'notes': '', 'photo': None},
]

EMPLOYEES = [
    {'id': 'emp-1', 'name': 'Meera Kapoor', 'role': 'Senior Stylist', 'photo': None, 'available': True,
     'specialties': ['Hair Colour', 'Haircut & Styling'], 'rating': 4.9, 'nextAvailable': 'Now',
     'workingHours': {'start': '09:00', 'end': '18:00'}},
    {'id': 'emp-2', 'name': 'Arjun Nair', 'role': 'Barber', 'photo': None, 'available': True,
     'specialties': ['Beard Trim', 'Haircut & Styling'], 'rating': 4.7, 'nextAvailable': 'Now',
     'workingHours': {'start': '10:00', 'end': '19:00'}},
    {'id': 'emp-3', 'name': 'Sneha Reddy', 'role': 'Beautician', 'photo': None, 'available': False,
     'specialties': ['Classic Facial', 'Manicure', 'Pedicure'], 'rating': 4.8, 'nextAvailable': '14:30',
     'workingHours': {'start': '11:00', 'end': '20:00'}},
]

PRODUCTS = [
    {'id': 'prod-1', 'name': 'Argan Oil Shampoo', 'price': 650.0, 'image': None, 'category': 'Hair Care',
     'stock': 24, 'description': 'Sulphate-free shampoo for dry hair', 'brand': 'Moroccan Gold'},
    {'id': 'prod-2', 'name': 'Keratin Conditioner', 'price': 720.0, 'image': None, 'category': 'Hair Care',
     'stock': 18, 'description': 'Smoothing conditioner with keratin', 'brand': 'SilkPro'},
    {'id': 'prod-3', 'name': 'Beard Oil', 'price': 399.0, 'image': None, 'category': 'Grooming',
     'stock': 30, 'description': 'Cedarwood beard conditioning oil', 'brand': 'Urban Groom'},
    {'id': 'prod-4', 'name': 'Vitamin C Serum', 'price': 899.0, 'image': None, 'category': 'Skin Care',
     'stock': 12, 'description': 'Brightening face serum', 'brand': 'Glow Lab'},
]

def load_seed_data():
    return {
        'customers': CUSTOMERS,
        'employees': EMPLOYEES,
        'services': SERVICES,
        'products': PRODUCTS,
    }
