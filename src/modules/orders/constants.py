"""Order domain constants."""

ORDERS_COLLECTION = "orders"

CLIENT_NAME_REQUIRED = "Client name is required and cannot be empty"
DELIVERY_DATE_REQUIRED = "Delivery date is required"
DELIVERY_DATE_NOT_FUTURE = "Delivery date must be at least tomorrow"
ITEMS_REQUIRED = "At least one item is required"
FRUIT_NAME_REQUIRED = "Fruit name is required and cannot be empty"
QUANTITY_NOT_POSITIVE = "Quantity must be greater than zero"
