"""
Entities

Plain records for the four sample collections. Every entity carries an
integer ``id``; foreign keys are plain integers and are never validated.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass
class Customer:
    id: int
    name: str
    city: str


@dataclass
class Order:
    id: int
    customer_id: int
    order_date: date
    total_amount: Decimal


@dataclass
class Product:
    id: int
    name: str
    price: Decimal


@dataclass
class OrderDetail:
    id: int
    order_id: int
    product_id: int
    quantity: int
