from .department import Department
from .employee import Employee
from .product import Product
from .raw_material import RawMaterial
from .customer import Customer
from .supplier import Supplier
from .defect import Defect
from .material_mapping import MaterialMapping
__all__ = ["Department","Employee","Product","RawMaterial","Customer","Supplier","Defect","MaterialMapping"]
