# frontend/mfg_ui/routes.py
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Route:
    path: str
    title: str
    script: str
    icon: str = ""
    table: Optional[str] = None

    @property
    def url_path(self) -> str:
        return self.path.strip("/")


# unknown paths are handled by st.navigation (not-found notice, then the default page)
ROUTES = (
    Route("/", "Dashboard", "pages/dashboard.py", "🏭"),
    Route("/departments", "Departments", "pages/departments.py", "🏢", "departments"),
    Route("/employees", "Employees", "pages/employees.py", "👷", "employees"),
    Route("/products", "Products", "pages/products.py", "📦", "products"),
    Route("/raw-materials", "Raw Materials", "pages/raw_materials.py", "🧱", "raw_materials"),
    Route("/customers", "Customers", "pages/customers.py", "🤝", "customers"),
    Route("/suppliers", "Suppliers", "pages/suppliers.py", "🚚", "suppliers"),
    Route("/defects", "Defects", "pages/defects.py", "🐞", "defects"),
    Route("/analytics", "Analytics", "pages/analytics.py", "📊"),
    Route("/material-mapping", "Material Mapping", "pages/material_mapping.py", "🧮", "material_mappings"),
    Route("/settings", "Settings", "pages/settings.py", "⚙️"),
    Route("/logout", "Logout", "pages/logout.py", "🚪"),
)


def route_for_table(table: str) -> Optional[Route]:
    for r in ROUTES:
        if r.table == table:
            return r
    return None
