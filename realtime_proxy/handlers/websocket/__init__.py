"""WebSocket relay exports."""

from .acceptor import RealtimeAcceptor, is_realtime_path
from .connector import UpstreamConnector
from .frames import Frame, FrameMode
from .keepalive import KeepaliveDriver
from .legs import ClientLeg, Leg, LegState, UpstreamLeg
from .lifecycle import LifecycleCoordinator, PairState
from .manager import handle_realtime_connection
from .pair import ConnectionPair
from .settings import RelaySettings

__all__ = [
    "RealtimeAcceptor",
    "is_realtime_path",
    "UpstreamConnector",
    "Frame",
    "FrameMode",
    "KeepaliveDriver",
    "ClientLeg",
    "Leg",
    "LegState",
    "UpstreamLeg",
    "LifecycleCoordinator",
    "PairState",
    "handle_realtime_connection",
    "ConnectionPair",
    "RelaySettings",
]
