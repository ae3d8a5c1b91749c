"""Score ledger implementations.

The engine is written against :class:`ScoreLedger`; pick the local ledger for
a single-machine schedule or the HTTP ledger for the shared score service.
"""

from bracketschedule.ledger.base import ScoreLedger
from bracketschedule.ledger.local import InMemoryScoreLedger
from bracketschedule.ledger.remote import HttpScoreLedger

__all__ = ["ScoreLedger", "InMemoryScoreLedger", "HttpScoreLedger"]
