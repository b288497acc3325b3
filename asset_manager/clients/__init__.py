from asset_manager.clients.keys import KeyDaemon
from asset_manager.clients.ledger import LedgerNode

__all__ = ["KeyDaemon", "LedgerNode"]
