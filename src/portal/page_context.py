# This file defines the context object handed to every page renderer.
# It exists so pages receive configuration, data access, the signed-in user, and the current path in one argument.

from __future__ import annotations

from dataclasses import dataclass

from src.portal.data_access import PortalDataAccess
from src.portal.portal_config import PortalConfig
from src.portal.session import SessionUser


@dataclass(frozen=True)
class PageContext:
    config: PortalConfig
    data: PortalDataAccess
    user: SessionUser
    path: str
