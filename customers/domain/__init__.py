"""
顾客领域模型包。
"""

from customers.domain.entities import Customer
from customers.domain.repositories import CustomerRepository

__all__ = [
    'Customer',
    'CustomerRepository',
]
