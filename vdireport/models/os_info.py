"""Operating system descriptor model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OsDescriptor:
    """Identifying values of the local Windows installation."""
    build_number: int
    update_revision: int = 0
    edition_id: str = ""
    product_name: str = ""

    @property
    def is_server(self) -> bool:
        return "Server" in self.product_name
