import logging

from mfg_api.core.db import SessionLocal, Base, engine
from mfg_api.models import (
    Customer, Defect, Department, Employee, MaterialMapping, Product, RawMaterial, Supplier,
)

from sqlalchemy import select
from contextlib import contextmanager

logger = logging.getLogger(__name__)

# ---------- helpers ----------

@contextmanager
def session_scope():
    """One-shot session (rollback on error)."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

def get_one(db, model, **by):
    """Row by unique-ish fields (or None)."""
    return db.execute(select(model).filter_by(**by)).scalars().first()

def get_or_create(db, model, unique_by: dict, defaults: dict | None = None):
    """Look up by unique_by, create when missing (idempotent)."""
    inst = get_one(db, model, **unique_by)
    if inst:
        return inst, False
    data = {**unique_by, **(defaults or {})}
    inst = model(**data)
    db.add(inst)
    # caller commits
    return inst, True

# ---------- demo data (idempotent) ----------

DEPARTMENTS = [
    {"name": "Production",        "location": "Building A", "manager": "Tom Baker",    "employee_count": 42},
    {"name": "Quality Assurance", "location": "Building B", "manager": "Nina Patel",   "employee_count": 12},
    {"name": "Logistics",         "location": "Building C", "manager": "Omar Haddad",  "employee_count": 18},
    {"name": "R&D",               "location": "Building B", "manager": "Grace Kim",    "employee_count": 9},
]

EMPLOYEES = [
    {"name": "John Smith",    "position": "Line Supervisor", "department": "Production",        "email": "jsmith@example.com",  "phone": "555-0101", "join_date": "2021-03-15"},
    {"name": "Sarah Johnson", "position": "QA Engineer",     "department": "Quality Assurance", "email": "sjohnson@example.com", "phone": "555-0102", "join_date": "2022-07-01"},
    {"name": "Michael Brown", "position": "Technician",      "department": "Production",        "email": "mbrown@example.com",  "phone": "555-0103", "join_date": "2020-11-23"},
]

PRODUCTS = [
    {"name": "Industrial Valve X200", "sku": "IV-X200", "category": "Valves",      "price": "$249.99",  "stock": 120, "description": "High pressure stainless valve"},
    {"name": "Electric Motor M500",   "sku": "EM-M500", "category": "Motors",      "price": "$899.00",  "stock": 35,  "description": "5 kW induction motor"},
    {"name": "Control Panel CP100",   "sku": "CP-100",  "category": "Electronics", "price": "$1299.00", "stock": 14,  "description": "Touchscreen control panel"},
    {"name": "Hydraulic Pump HP50",   "sku": "HP-50",   "category": "Pumps",       "price": "$579.50",  "stock": 22,  "description": "50 bar hydraulic pump"},
    {"name": "Steel Pipe S100",       "sku": "SP-S100", "category": "Piping",      "price": "$39.90",   "stock": 640, "description": "1 m stainless pipe"},
]

RAW_MATERIALS = [
    {"name": "Stainless Steel", "code": "RM-SS",  "category": "Metals",      "supplier": "Steel Industries Inc.", "stock_quantity": 1200, "unit_cost": "$12.50", "description": "per kg"},
    {"name": "Copper Wire",     "code": "RM-CW",  "category": "Metals",      "supplier": "ElectroCom Suppliers",  "stock_quantity": 5000, "unit_cost": "$8.75",  "description": "per m"},
    {"name": "Nylon Polymer",   "code": "RM-NP",  "category": "Polymers",    "supplier": "PolyTech Solutions",    "stock_quantity": 800,  "unit_cost": "$6.20",  "description": "per kg"},
    {"name": "Silicon Wafer",   "code": "RM-SW",  "category": "Electronics", "supplier": "TechWare Components",   "stock_quantity": 300,  "unit_cost": "$45.00", "description": "per unit"},
    {"name": "Aluminum Sheets", "code": "RM-AL",  "category": "Metals",      "supplier": "MetalWorks Co.",        "stock_quantity": 450,  "unit_cost": "$18.30", "description": "per m²"},
]

CUSTOMERS = [
    {"name": "Acme Industries",        "contact": "John Smith",    "email": "jsmith@acme.com",       "phone": "555-1234", "address": "123 Main St, Metropolis",       "order_count": 12, "status": "Active"},
    {"name": "TechWorks Inc.",         "contact": "Jane Doe",      "email": "jane@techworks.com",    "phone": "555-2345", "address": "456 Tech Blvd, Silicon Valley", "order_count": 8,  "status": "Active"},
    {"name": "Global Enterprises",     "contact": "Robert Brown",  "email": "rbrown@global.com",     "phone": "555-3456", "address": "789 Global Ave, New York",      "order_count": 3,  "status": "Inactive"},
    {"name": "Superior Manufacturing", "contact": "Sarah Johnson", "email": "sjohnson@superior.com", "phone": "555-4567", "address": "321 Factory Lane, Chicago",     "order_count": 21, "status": "Active"},
    {"name": "Prime Solutions LLC",    "contact": "Michael Chen",  "email": "mchen@prime.com",       "phone": "555-5678", "address": "555 Solution Drive, Boston",    "order_count": 5,  "status": "Active"},
]

SUPPLIERS = [
    {"name": "Steel Industries Inc.", "contact": "Robert Steel",  "email": "rsteel@steelindustries.com", "phone": "555-1234", "address": "123 Industrial Blvd, Pittsburgh", "materials": "Stainless Steel, Carbon Steel",   "status": "Active"},
    {"name": "ElectroCom Suppliers",  "contact": "Sarah Wires",   "email": "swires@electrocom.com",      "phone": "555-2345", "address": "456 Electronics Way, San Jose",   "materials": "Copper Wire, Circuit Components", "status": "Active"},
    {"name": "PolyTech Solutions",    "contact": "James Polymer", "email": "jpolymer@polytech.com",      "phone": "555-3456", "address": "789 Polymer St, Chicago",         "materials": "Nylon Polymer, Plastics",         "status": "Inactive"},
    {"name": "TechWare Components",   "contact": "Lisa Circuit",  "email": "lcircuit@techware.com",      "phone": "555-4567", "address": "101 Tech Drive, Austin",          "materials": "Silicon Wafers, Microchips",      "status": "Active"},
    {"name": "MetalWorks Co.",        "contact": "Michael Smith", "email": "msmith@metalworks.com",      "phone": "555-5678", "address": "202 Alloy Road, Detroit",         "materials": "Aluminum, Brass, Titanium",       "status": "Active"},
]

DEFECTS = [
    {"product": "Industrial Valve X200", "description": "Valve leaking at high pressure",              "reported_by": "John Smith",    "report_date": "2023-05-10", "status": "Open",        "severity": "High"},
    {"product": "Electric Motor M500",   "description": "Motor overheating after 2 hours of operation", "reported_by": "Sarah Johnson", "report_date": "2023-06-15", "status": "In Progress", "severity": "Critical"},
    {"product": "Control Panel CP100",   "description": "Touchscreen unresponsive in certain areas",    "reported_by": "Michael Brown", "report_date": "2023-07-20", "status": "Resolved",    "severity": "Medium"},
    {"product": "Hydraulic Pump HP50",   "description": "Pressure inconsistent during operation",       "reported_by": "Robert Davis",  "report_date": "2023-08-05", "status": "Open",        "severity": "High"},
    {"product": "Steel Pipe S100",       "description": "Pipe showing signs of premature corrosion",    "reported_by": "Jane Doe",      "report_date": "2023-09-12", "status": "In Progress", "severity": "Medium"},
]

MAPPINGS = [
    {"product": "Industrial Valve X200", "material": "Stainless Steel", "quantity": 2.5,  "unit": "kg",    "cost": "$31.25"},
    {"product": "Industrial Valve X200", "material": "Copper Wire",     "quantity": 0.5,  "unit": "m",     "cost": "$4.38"},
    {"product": "Electric Motor M500",   "material": "Copper Wire",     "quantity": 15,   "unit": "m",     "cost": "$131.25"},
    {"product": "Electric Motor M500",   "material": "Silicon Wafer",   "quantity": 2,    "unit": "units", "cost": "$90.00"},
    {"product": "Control Panel CP100",   "material": "Aluminum Sheets", "quantity": 1.2,  "unit": "m²",    "cost": "$21.96"},
    {"product": "Control Panel CP100",   "material": "Silicon Wafer",   "quantity": 3,    "unit": "units", "cost": "$135.00"},
    {"product": "Hydraulic Pump HP50",   "material": "Stainless Steel", "quantity": 1.8,  "unit": "kg",    "cost": "$22.50"},
    {"product": "Hydraulic Pump HP50",   "material": "Nylon Polymer",   "quantity": 0.75, "unit": "kg",    "cost": "$4.65"},
    {"product": "Steel Pipe S100",       "material": "Stainless Steel", "quantity": 10,   "unit": "kg",    "cost": "$125.00"},
]

def run():
    Base.metadata.create_all(bind=engine, checkfirst=True)

    with session_scope() as db:
        logger.info(">> Seeding: departments / employees / products / raw_materials")
        for d in DEPARTMENTS:
            get_or_create(db, Department, {"name": d["name"]}, defaults=d)
        for e in EMPLOYEES:
            get_or_create(db, Employee, {"email": e["email"]}, defaults=e)
        for p in PRODUCTS:
            get_or_create(db, Product, {"sku": p["sku"]}, defaults=p)
        for m in RAW_MATERIALS:
            get_or_create(db, RawMaterial, {"code": m["code"]}, defaults=m)

    with session_scope() as db:
        logger.info(">> Seeding: customers / suppliers / defects / material_mappings")
        for c in CUSTOMERS:
            get_or_create(db, Customer, {"name": c["name"]}, defaults=c)
        for s in SUPPLIERS:
            get_or_create(db, Supplier, {"name": s["name"]}, defaults=s)
        for d in DEFECTS:
            get_or_create(db, Defect, {"product": d["product"], "report_date": d["report_date"]}, defaults=d)
        for m in MAPPINGS:
            get_or_create(db, MaterialMapping, {"product": m["product"], "material": m["material"]}, defaults=m)

    logger.info("Seed done.")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    run()
