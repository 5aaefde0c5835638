"""
Dialect emitters.

Contains one emitter per supported validation library.
"""

from __future__ import annotations

from .arktype_backend import ArkTypeEmitter
from .base import SchemaEmitter
from .typebox_backend import TypeBoxEmitter
from .valibot_backend import ValibotEmitter
from .zod_backend import ZodEmitter
from .zod_mini_backend import ZodMiniEmitter

__all__ = [
    "SchemaEmitter",
    "ZodEmitter",
    "ZodMiniEmitter",
    "ValibotEmitter",
    "ArkTypeEmitter",
    "TypeBoxEmitter",
]
