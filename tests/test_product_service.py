"""Product service tests."""

from sqlalchemy import event

from src.models.product import Product
from src.services.product_service import ProductService


def _record_statements(db):
    statements = []

    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement.strip().split()[0].upper())

    engine = db.get_bind()
    event.listen(engine, "before_cursor_execute", before_cursor_execute)
    return engine, before_cursor_execute, statements


def test_update_is_a_single_statement(db):
    """Test update writes and returns the row in one round trip."""
    service = ProductService(db)
    product = service.create("Widget", 9.99)

    engine, listener, statements = _record_statements(db)
    try:
        updated = service.update(product.id, "Widget Pro", 14.5)
    finally:
        event.remove(engine, "before_cursor_execute", listener)

    assert statements == ["UPDATE"]
    assert (updated.id, updated.name, updated.price) == (product.id, "Widget Pro", 14.5)


def test_delete_is_a_single_statement(db):
    """Test delete removes and returns the row in one round trip."""
    service = ProductService(db)
    product = service.create("Widget", 9.99)
    product_id = product.id

    engine, listener, statements = _record_statements(db)
    try:
        deleted = service.delete(product_id)
    finally:
        event.remove(engine, "before_cursor_execute", listener)

    assert statements == ["DELETE"]
    assert (deleted.id, deleted.name, deleted.price) == (product_id, "Widget", 9.99)
    assert db.query(Product).count() == 0


def test_update_row_removed_elsewhere_returns_none(db):
    """Test a row deleted after it was loaded is reported as missing, not an error."""
    service = ProductService(db)
    product = service.create("Widget", 9.99)
    product_id = product.id
    assert service.get_by_id(product_id) is product

    with db.get_bind().begin() as conn:
        conn.execute(Product.__table__.delete().where(Product.__table__.c.id == product_id))

    assert service.update(product_id, "Ghost", 1) is None
    assert service.delete(product_id) is None
