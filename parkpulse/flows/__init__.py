from parkpulse.flows.chat_assistant import ChatAssistant
from parkpulse.flows.marketplace import MarketplaceDesk
from parkpulse.flows.owner_dashboard import OwnerDashboard

__all__ = ["ChatAssistant", "MarketplaceDesk", "OwnerDashboard"]
