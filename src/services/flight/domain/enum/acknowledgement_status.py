from enum import Enum


class AcknowledgementStatus(str, Enum):
    """予約受付ステータス"""

    SUCCESS = "success"
