"""Watches network reachability through ``QNetworkInformation``."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal
from PySide6.QtNetwork import QNetworkInformation

from daily_quiz.core.connectivity import is_online

logger = logging.getLogger(__name__)


class NetworkStatus(QObject):
    """Emits ``online_changed(bool)`` whenever the device goes on- or offline."""

    online_changed = Signal(bool)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._online = True
        self._information: QNetworkInformation | None = None

        if not QNetworkInformation.loadBackendByFeatures(QNetworkInformation.Feature.Reachability):
            logger.warning("No network reachability backend available; assuming online.")
            return
        self._information = QNetworkInformation.instance()
        self._information.reachabilityChanged.connect(self._handle_reachability)
        self._online = is_online(self._information.reachability().name)
        logger.info(
            "Network reachability via %s backend: %s",
            self._information.backendName(),
            self._information.reachability().name,
        )

    def is_online(self) -> bool:
        return self._online

    def _handle_reachability(self, reachability: QNetworkInformation.Reachability) -> None:
        online = is_online(reachability.name)
        if online == self._online:
            return
        self._online = online
        logger.info("Network is now %s", "online" if online else "offline")
        self.online_changed.emit(online)
