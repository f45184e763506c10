# barberapp/data.py

# Seed data for the in-memory repositories.
SERVICES = [
    {"id": "1", "name": "Classic Haircut", "description": "Traditional haircut with scissors and clippers.", "duration": 30, "price": 25, "category": "Haircuts", "active": True},
    {"id": "2", "name": "Beard Trim & Shape", "description": "Shape and trim your beard to perfection.", "duration": 20, "price": 18, "category": "Beard Care", "active": True},
    {"id": "3", "name": "Hot Towel Shave", "description": "Relaxing hot towel shave with a straight razor.", "duration": 45, "price": 40, "category": "Shaves", "active": True},
    {"id": "4", "name": "Hair Wash & Style", "description": "Shampoo, condition, and professional styling.", "duration": 25, "price": 22, "category": "Styling", "active": True},
    {"id": "5", "name": "Skin Fade Haircut", "description": "Modern fade down to the skin.", "duration": 45, "price": 35, "category": "Haircuts", "active": True},
    {"id": "6", "name": "Full Beard Grooming", "description": "Wash, condition, trim, shape, and oil.", "duration": 30, "price": 30, "category": "Beard Care", "active": True},
    {"id": "7", "name": "Head Shave", "description": "Smooth head shave with clippers or razor.", "duration": 30, "price": 28, "category": "Shaves", "active": True},
    {"id": "8", "name": "Kids Haircut", "description": "Patient and stylish cuts for children (under 12).", "duration": 25, "price": 20, "category": "Haircuts", "active": True},
    {"id": "9", "name": "Hair Coloring", "description": "Consultation required. Price varies.", "duration": 60, "price": 50, "category": "Coloring", "active": False},
    {"id": "10", "name": "Simple Trim", "description": "Quick cleanup around ears and neck.", "duration": 15, "price": 15, "category": "Haircuts", "active": True},
]

APPOINTMENTS = [
    {"id": "a1", "client_name": "John Doe", "client_phone": "+15551234", "client_email": "john@example.com", "service_name": "Corte de Cabelo Clássico", "date": "2024-09-15T10:00:00Z", "status": "Confirmed"},
    {"id": "a2", "client_name": "Jane Smith", "client_phone": "+15555678", "client_email": "jane@example.com", "service_name": "Aparar e Modelar Barba", "date": "2024-09-15T11:30:00Z", "status": "Pending"},
    {"id": "a3", "client_name": "Bob Johnson", "client_phone": "+15559012", "client_email": "bob@example.com", "service_name": "Barbear com Toalha Quente", "date": "2024-09-16T14:00:00Z", "status": "Completed"},
    {"id": "a4", "client_name": "Carlos Rey", "client_phone": "+346661122", "client_email": "carlos@email.es", "service_name": "Corte Degradê (Skin Fade)", "date": "2024-09-17T09:00:00Z", "status": "Confirmed"},
]

# Start times offered by the booking form
AVAILABLE_TIMES = [
    "09:00", "09:30", "10:00", "10:30", "11:00", "11:30",
    "13:00", "13:30", "14:00", "14:30", "15:00", "15:30",
    "16:00", "16:30", "17:00",
]

shop_settings = {
    "currency": "BRL",
    "currency_symbol": "R$",
    "timezone": "UTC",
}
