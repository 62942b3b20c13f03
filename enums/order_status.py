from enum import Enum


class OrderStatus(Enum):
    PENDING = "PENDING"        # Created from a cart, waiting for payment
    PAID = "PAID"              # Paid successfully
    SHIPPED = "SHIPPED"        # Handed over to the carrier
    DELIVERED = "DELIVERED"    # Received by the customer
    CANCELLED = "CANCELLED"    # Cancelled by user or admin
