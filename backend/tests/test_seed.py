from sqlalchemy import func, select

from mfg_api.core.db import SessionLocal
from mfg_api.models import Department, MaterialMapping, Supplier
from mfg_api.scripts import seed


def _count(model):
    with SessionLocal() as db:
        return db.execute(select(func.count()).select_from(model)).scalar()


def test_seed_is_idempotent(fresh_store):
    seed.run()
    first = (_count(Department), _count(Supplier), _count(MaterialMapping))
    assert first == (len(seed.DEPARTMENTS), len(seed.SUPPLIERS), len(seed.MAPPINGS))

    seed.run()
    assert (_count(Department), _count(Supplier), _count(MaterialMapping)) == first
