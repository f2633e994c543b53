# frontend/mfg_ui/entities.py
from .entity import (
    Column, DATE, DECIMAL, EntitySpec, Field, MONEY, NUMBER, SELECT, TEXTAREA,
)
from .mapping import UNIT_COSTS, mapping_record

PARTNER_STATUSES = ("Active", "Inactive")
DEFECT_STATUSES = ("Open", "In Progress", "Resolved", "Closed")
DEFECT_SEVERITIES = ("Low", "Medium", "High", "Critical")


def _department_view(row):
    out = dict(row)
    out["employee_count"] = row.get("employee_count") or 0
    return out


DEPARTMENTS = EntitySpec(
    name="Department",
    title="Departments",
    subtitle="Manage your company departments",
    table="departments",
    columns=(
        Column("name", "Department Name"),
        Column("location", "Location"),
        Column("manager", "Manager"),
        Column("employee_count", "Employees"),
    ),
    fields=(
        Field("name", "Name", required=True),
        Field("location", "Location"),
        Field("manager", "Manager"),
    ),
    insert_defaults={"employee_count": 0},
    to_view=_department_view,
)

EMPLOYEES = EntitySpec(
    name="Employee",
    title="Employees",
    subtitle="Manage your workforce",
    table="employees",
    columns=(
        Column("name", "Name"),
        Column("position", "Position"),
        Column("department", "Department"),
        Column("email", "Email"),
        Column("phone", "Phone"),
        Column("join_date", "Join Date"),
    ),
    fields=(
        Field("name", "Name", required=True),
        Field("position", "Position"),
        Field("department", "Department", kind=SELECT, options_from=("departments", "name")),
        Field("email", "Email"),
        Field("phone", "Phone"),
        Field("join_date", "Join Date", kind=DATE),
    ),
)

PRODUCTS = EntitySpec(
    name="Product",
    title="Products",
    subtitle="Manage your product catalog",
    table="products",
    columns=(
        Column("name", "Product Name"),
        Column("sku", "SKU"),
        Column("category", "Category"),
        Column("price", "Price"),
        Column("stock", "Stock"),
    ),
    fields=(
        Field("name", "Name", required=True),
        Field("sku", "SKU"),
        Field("category", "Category"),
        Field("price", "Price ($)", kind=MONEY),
        Field("stock", "Stock", kind=NUMBER),
        Field("description", "Description", kind=TEXTAREA),
    ),
)

RAW_MATERIALS = EntitySpec(
    name="Raw Material",
    title="Raw Materials",
    subtitle="Manage your raw material inventory",
    table="raw_materials",
    columns=(
        Column("name", "Material Name"),
        Column("code", "Code"),
        Column("category", "Category"),
        Column("supplier", "Supplier"),
        Column("stock_quantity", "Stock Qty"),
        Column("unit_cost", "Unit Cost"),
    ),
    fields=(
        Field("name", "Name", required=True),
        Field("code", "Code"),
        Field("category", "Category"),
        Field("supplier", "Supplier"),
        Field("stock_quantity", "Stock Quantity", kind=NUMBER),
        Field("unit_cost", "Unit Cost ($)", kind=MONEY),
        Field("description", "Description", kind=TEXTAREA),
    ),
)

CUSTOMERS = EntitySpec(
    name="Customer",
    title="Customers",
    subtitle="Manage your customer relationships",
    table="customers",
    columns=(
        Column("name", "Company Name"),
        Column("contact", "Contact Person"),
        Column("email", "Email"),
        Column("phone", "Phone"),
        Column("status", "Status"),
    ),
    fields=(
        Field("name", "Company Name", required=True),
        Field("contact", "Contact Person"),
        Field("email", "Email"),
        Field("phone", "Phone"),
        Field("address", "Address", kind=TEXTAREA),
        Field("order_count", "Orders", kind=NUMBER, default="0"),
        Field("status", "Status", kind=SELECT, options=PARTNER_STATUSES, default="Active"),
    ),
)

SUPPLIERS = EntitySpec(
    name="Supplier",
    title="Suppliers",
    subtitle="Manage your supply chain partners",
    table="suppliers",
    columns=(
        Column("name", "Company Name"),
        Column("contact", "Contact Person"),
        Column("email", "Email"),
        Column("phone", "Phone"),
        Column("materials", "Materials Supplied"),
        Column("status", "Status"),
    ),
    fields=(
        Field("name", "Company Name", required=True),
        Field("contact", "Contact Person"),
        Field("email", "Email"),
        Field("phone", "Phone"),
        Field("address", "Address", kind=TEXTAREA),
        Field("materials", "Materials Supplied", kind=TEXTAREA),
        Field("status", "Status", kind=SELECT, options=PARTNER_STATUSES, default="Active"),
    ),
)

DEFECTS = EntitySpec(
    name="Defect",
    title="Defects",
    subtitle="Track and manage product defects",
    table="defects",
    columns=(
        Column("product", "Product"),
        Column("description", "Description"),
        Column("reported_by", "Reported By"),
        Column("report_date", "Report Date"),
        Column("status", "Status"),
        Column("severity", "Severity"),
    ),
    fields=(
        Field("product", "Product", kind=SELECT, required=True, options_from=("products", "name")),
        Field("description", "Description", kind=TEXTAREA, required=True),
        Field("reported_by", "Reported By"),
        Field("report_date", "Report Date", kind=DATE),
        Field("status", "Status", kind=SELECT, options=DEFECT_STATUSES, default="Open"),
        Field("severity", "Severity", kind=SELECT, options=DEFECT_SEVERITIES, default="Medium"),
    ),
    describe=lambda r: f"Defect for {r.get('product') or ''}",
    added_title="Defect Reported",
)

MATERIAL_MAPPINGS = EntitySpec(
    name="Material Mapping",
    title="Material Mappings",
    subtitle="Map raw materials to products and track material costs",
    table="material_mappings",
    columns=(
        Column("product", "Product"),
        Column("material", "Material"),
        Column("quantity", "Quantity"),
        Column("unit", "Unit"),
        Column("cost", "Cost"),
    ),
    fields=(
        Field("product", "Product", kind=SELECT, required=True, options_from=("products", "name")),
        Field("material", "Material", kind=SELECT, required=True, options=tuple(UNIT_COSTS)),
        Field("quantity", "Quantity", kind=DECIMAL, required=True),
        Field("unit", "Unit"),
    ),
    to_record=mapping_record,
    describe=lambda r: f"Mapping between {r.get('product') or ''} and {r.get('material') or ''}",
)

ALL_SPECS = (
    DEPARTMENTS, EMPLOYEES, PRODUCTS, RAW_MATERIALS,
    CUSTOMERS, SUPPLIERS, DEFECTS, MATERIAL_MAPPINGS,
)

SPECS_BY_TABLE = {s.table: s for s in ALL_SPECS}
