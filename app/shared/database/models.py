from sqlalchemy import Column, Integer, String, Float, Date, DateTime, ForeignKey, UniqueConstraint
from app.config.database import Base

# ===== UBICACIÓN =====

class Locality(Base):
    """Localidad donde operan vendedores, transportistas y almacenes"""
    __tablename__ = "localities"

    id = Column(Integer, primary_key=True, index=True)
    locality_name = Column(String(255), nullable=False)
    province_name = Column(String(255), nullable=False)
    country_name = Column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint('locality_name', name='localities_locality_name_unique'),
    )

# ===== VENDEDORES Y TRANSPORTISTAS =====

class Seller(Base):
    __tablename__ = "sellers"

    id = Column(Integer, primary_key=True, index=True)
    cid = Column(Integer, nullable=False)
    company_name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    telephone = Column(String(50), nullable=False)
    locality_id = Column(Integer, ForeignKey("localities.id"), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint('cid', name='sellers_cid_unique'),
    )

class Carrier(Base):
    __tablename__ = "carriers"

    id = Column(Integer, primary_key=True, index=True)
    cid = Column(String(255), nullable=False)
    company_name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    telephone = Column(String(50), nullable=False)
    locality_id = Column(Integer, ForeignKey("localities.id"), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint('cid', name='carriers_cid_unique'),
    )

# ===== ALMACENES =====

class Warehouse(Base):
    __tablename__ = "warehouses"

    id = Column(Integer, primary_key=True, index=True)
    warehouse_code = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    telephone = Column(String(50), nullable=False)
    minimum_capacity = Column(Integer, nullable=False)
    minimum_temperature = Column(Float, nullable=False)
    locality_id = Column(Integer, ForeignKey("localities.id"), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint('warehouse_code', name='warehouses_code_unique'),
    )

class Section(Base):
    """Sección refrigerada dentro de un almacén"""
    __tablename__ = "sections"

    id = Column(Integer, primary_key=True, index=True)
    section_number = Column(Integer, nullable=False)
    current_temperature = Column(Float, nullable=False)
    minimum_temperature = Column(Float, nullable=False)
    current_capacity = Column(Integer, nullable=False)
    minimum_capacity = Column(Integer, nullable=False)
    maximum_capacity = Column(Integer, nullable=False)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False, index=True)
    product_type_id = Column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint('section_number', name='sections_number_unique'),
    )

class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    card_number_id = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint('card_number_id', name='employees_card_number_unique'),
    )

# ===== PRODUCTOS =====

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    product_code = Column(String(255), nullable=False)
    description = Column(String(255), nullable=False)
    width = Column(Float, nullable=False)
    height = Column(Float, nullable=False)
    length = Column(Float, nullable=False)
    net_weight = Column(Float, nullable=False)
    expiration_rate = Column(Float, nullable=False)
    recommended_freezing_temperature = Column(Float, nullable=False)
    freezing_rate = Column(Float, nullable=False)
    product_type_id = Column(Integer, nullable=False)
    seller_id = Column(Integer, ForeignKey("sellers.id"), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint('product_code', name='products_code_unique'),
    )

class ProductRecord(Base):
    """Histórico de precios de un producto"""
    __tablename__ = "product_records"

    id = Column(Integer, primary_key=True, index=True)
    last_update_date = Column(DateTime, nullable=False)
    purchase_price = Column(Float, nullable=False)
    sale_price = Column(Float, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)

class ProductBatch(Base):
    """Lote de producto almacenado en una sección"""
    __tablename__ = "product_batches"

    id = Column(Integer, primary_key=True, index=True)
    batch_number = Column(Integer, nullable=False)
    current_quantity = Column(Integer, nullable=False)
    current_temperature = Column(Float, nullable=False)
    due_date = Column(Date, nullable=False)
    initial_quantity = Column(Integer, nullable=False)
    manufacturing_date = Column(Date, nullable=False)
    manufacturing_hour = Column(Integer, nullable=False)
    minimum_temperature = Column(Float, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    section_id = Column(Integer, ForeignKey("sections.id"), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint('batch_number', name='product_batches_number_unique'),
    )

# ===== ÓRDENES =====

class InboundOrder(Base):
    """Orden de entrada de un lote a un almacén"""
    __tablename__ = "inbound_orders"

    id = Column(Integer, primary_key=True, index=True)
    order_date = Column(Date, nullable=False)
    order_number = Column(String(255), nullable=False)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    product_batch_id = Column(Integer, ForeignKey("product_batches.id"), nullable=False, index=True)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint('order_number', name='inbound_orders_number_unique'),
    )

class Buyer(Base):
    __tablename__ = "buyers"

    id = Column(Integer, primary_key=True, index=True)
    card_number_id = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint('card_number_id', name='buyers_card_number_unique'),
    )

class PurchaseOrder(Base):
    __tablename__ = "purchase_orders"

    id = Column(Integer, primary_key=True, index=True)
    order_number = Column(String(255), nullable=False)
    order_date = Column(Date, nullable=False)
    tracking_code = Column(String(255), nullable=False)
    buyer_id = Column(Integer, ForeignKey("buyers.id"), nullable=False, index=True)
    product_record_id = Column(Integer, ForeignKey("product_records.id"), nullable=False, index=True)
    order_status_id = Column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint('order_number', name='purchase_orders_number_unique'),
    )
