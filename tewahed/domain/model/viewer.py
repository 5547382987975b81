"""Viewer identity."""

from tewahed.domain.model.common import DomainModel
from tewahed.domain.value import UserId


class Viewer(DomainModel):
    """The authenticated party making a request.

    ``is_admin`` is supplied by the identity layer; this service never
    decides who is an administrator.
    """

    user_id: UserId
    is_admin: bool = False
