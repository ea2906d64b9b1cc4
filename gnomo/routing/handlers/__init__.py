"""Pool-specific quote handlers."""

from gnomo.routing.handlers.base import BaseHandler, PoolHandler
from gnomo.routing.handlers.clmm import CLMMHandler
from gnomo.routing.handlers.v2 import V2Handler

__all__ = ["BaseHandler", "PoolHandler", "V2Handler", "CLMMHandler"]
