# milkcentre/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, Float,
    Text, ForeignKey, text
)

metadata = MetaData()


def _timestamp(name: str) -> Column:
    return Column(name, Text, server_default=text("CURRENT_TIMESTAMP"))


customers = Table(
    "customers",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", Text, nullable=False),
    Column("email", Text),
    Column("phone", Text, nullable=False),
    Column("address", Text),
    Column("outstandingBalance", Float, server_default=text("0")),
    Column("lastPaymentDate", Text),
    _timestamp("createdAt"),
    _timestamp("updatedAt"),
)

products = Table(
    "products",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", Text, nullable=False),
    Column("description", Text),
    Column("price", Float, nullable=False),
    Column("stock", Integer, server_default=text("0")),
    Column("category", Text),
    _timestamp("createdAt"),
    _timestamp("updatedAt"),
)

orders = Table(
    "orders",
    metadata,
    Column("id", Text, primary_key=True),
    Column("customerId", Text, ForeignKey("customers.id"), nullable=False),
    Column("totalAmount", Float, nullable=False),
    Column("date", Text, nullable=False),
    Column("status", Text, server_default=text("'pending'")),
    Column("notes", Text),
    _timestamp("createdAt"),
    _timestamp("updatedAt"),
)

# Junction table; no updatedAt column
order_items = Table(
    "order_items",
    metadata,
    Column("id", Text, primary_key=True),
    Column("orderId", Text, ForeignKey("orders.id"), nullable=False),
    Column("productId", Text, ForeignKey("products.id"), nullable=False),
    Column("quantity", Integer, nullable=False),
    Column("price", Float, nullable=False),
    _timestamp("createdAt"),
)

invoices = Table(
    "invoices",
    metadata,
    Column("id", Text, primary_key=True),
    Column("customerId", Text, ForeignKey("customers.id"), nullable=False),
    Column("orderId", Text, ForeignKey("orders.id")),
    Column("amount", Float, nullable=False),
    Column("date", Text, nullable=False),
    Column("dueDate", Text, nullable=False),
    Column("status", Text, server_default=text("'pending'")),
    Column("notes", Text),
    _timestamp("createdAt"),
    _timestamp("updatedAt"),
)

settings = Table(
    "settings",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", Text, nullable=False),
    Column("value", Text),
    Column("category", Text),
    _timestamp("createdAt"),
    _timestamp("updatedAt"),
)

# The whitelist. Order is the restore order for backups (parents first).
TABLES = {
    t.name: t
    for t in (customers, products, orders, order_items, invoices, settings)
}
TABLE_NAMES = tuple(TABLES)
