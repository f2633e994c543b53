# frontend/mfg_ui/mapping.py
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation

MONEY_PLACES = Decimal("0.01")  # 2 places

# static unit prices; cost is baked into each mapping at submit time
UNIT_COSTS = {
    "Stainless Steel": Decimal("12.5"),   # per kg
    "Copper Wire": Decimal("8.75"),       # per m
    "Nylon Polymer": Decimal("6.2"),      # per kg
    "Silicon Wafer": Decimal("45"),       # per unit
    "Aluminum Sheets": Decimal("18.3"),   # per m²
}

DEFAULT_UNITS = {
    "Stainless Steel": "kg",
    "Copper Wire": "m",
    "Nylon Polymer": "kg",
    "Silicon Wafer": "units",
    "Aluminum Sheets": "m²",
}


def _to_decimal(quantity) -> Decimal:
    try:
        d = quantity if isinstance(quantity, Decimal) else Decimal(str(quantity).strip())
    except (InvalidOperation, TypeError, ValueError):
        return Decimal(0)
    return d if d.is_finite() else Decimal(0)


def calculate_cost(material: str, quantity) -> str:
    """unit price x quantity, half-up to 2 places, "$" prefixed; unknown materials cost 0."""
    price = UNIT_COSTS.get(material)
    if price is None:
        return "$0.00"
    cost = (price * _to_decimal(quantity)).quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)
    return f"${cost}"


def mapping_record(record: dict) -> dict:
    """Fills the default unit for the material and bakes the cost."""
    out = dict(record)
    if not str(out.get("unit") or "").strip():
        out["unit"] = DEFAULT_UNITS.get(out.get("material", ""), "")
    out["cost"] = calculate_cost(out.get("material", ""), out.get("quantity", 0))
    return out
