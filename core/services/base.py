"""
Base Service
=============

Foundation for all service classes. Provides a standardised
logger and transaction helper.
"""

import logging
from django.db import transaction


class BaseService:
    """
    All service classes inherit from this.

    Subclass example::

        class ReactionService(BaseService):
            @classmethod
            def react(cls, post_id, user_id, reaction_type):
                ...

    Features:
        - ``cls.logger`` — pre-configured logger using the subclass module name
        - ``cls.atomic()`` — shortcut for ``transaction.atomic()``
    """

    logger: logging.Logger = logging.getLogger(__name__)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Each subclass gets its own logger named after its module
        cls.logger = logging.getLogger(cls.__module__)

    @staticmethod
    def atomic():
        """Shortcut for ``django.db.transaction.atomic()``."""
        return transaction.atomic()
