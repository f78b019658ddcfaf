"""
Configuration classes for IEDS Calculator
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .exceptions import ConfigurationError


class Strictness(Enum):
    """支配判定の厳しさ"""
    STRICT = "Strict"        # 全列で真に大きい
    WEAK = "Weak"            # 全列で以上かつ少なくとも1列で真に大きい
    VERYWEAK = "Very Weak"   # 全列で以上（同一戦略も支配とみなす）


class Player(Enum):
    """戦略を持つプレイヤー（行 = プレイヤー1, 列 = プレイヤー2）"""
    ROW = "Row"
    COL = "Col"


# CLIフラグ → 厳しさ
STRICTNESS_FLAGS: Dict[str, Strictness] = {
    "w": Strictness.WEAK,
    "v": Strictness.VERYWEAK,
}


@dataclass(frozen=True)
class EliminationConfig:
    """逐次消去の設定（イミュータブル）"""

    strictness: Strictness = Strictness.STRICT
    live_only: bool = False                  # Trueなら消去済みの相手戦略を同点として数えない
    max_iterations: int | None = None        # 反復回数の上限（Noneなら不動点まで）

    def __post_init__(self) -> None:
        """バリデーション"""
        if not isinstance(self.strictness, Strictness):
            raise ConfigurationError(
                f"strictnessはStrictnessである必要があります: {self.strictness!r}"
            )

        if self.max_iterations is not None and self.max_iterations < 1:
            raise ConfigurationError(
                f"反復回数の上限は1以上である必要があります: {self.max_iterations}"
            )

    def to_dict(self) -> dict:
        """設定を辞書形式に変換"""
        return {
            "strictness": self.strictness.value,
            "live_only": self.live_only,
            "max_iterations": self.max_iterations,
        }
