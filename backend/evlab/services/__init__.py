from .access_service import check_chat_access
from .chat_relay_service import build_chat_payload, relay_chat
from .dataset_service import Dataset, load_dataset

__all__ = [
    "check_chat_access",
    "build_chat_payload",
    "relay_chat",
    "Dataset",
    "load_dataset",
]
