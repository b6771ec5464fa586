from uuid import UUID

import attrs


@attrs.frozen
class Principal:
    """Verified identity and authorization level attached to a request"""

    user_id: UUID
    is_admin: bool = False
