"""Payment reports."""

from welfare_ledger.reports.lobby import UNKNOWN_CMS_ID, UNKNOWN_NAME, LobbyReport

__all__ = ["LobbyReport", "UNKNOWN_CMS_ID", "UNKNOWN_NAME"]
