import enum


class ShippingMode(str, enum.Enum):
    """Defines how a shipment travels."""

    sea = "sea"
    air = "air"
