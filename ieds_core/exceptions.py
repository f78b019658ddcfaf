"""
Exception classes for IEDS Calculator
"""

from typing import Tuple


class IEDSError(Exception):
    """IEDS計算機の基底例外クラス"""
    pass


class ConfigurationError(IEDSError):
    """設定パラメータに関するエラー"""
    pass


class UsageError(IEDSError):
    """コマンドライン引数の組み合わせが不正"""
    pass


class MatrixLoadError(IEDSError):
    """利得行列の読み込みに失敗した"""
    def __init__(
        self,
        source: str,
        reason: str,
        cell: Tuple[int, int] | None = None
    ) -> None:
        self.source = source
        self.reason = reason
        self.cell = cell
        location = f" (row {cell[0] + 1}, col {cell[1] + 1})" if cell else ""
        super().__init__(f"Could not load file: {source}: {reason}{location}")


class IncompatibleMatricesError(IEDSError):
    """2つの利得行列のサイズが一致しない"""
    def __init__(
        self,
        shape1: Tuple[int, ...],
        shape2: Tuple[int, ...]
    ) -> None:
        self.shape1 = shape1
        self.shape2 = shape2
        super().__init__(
            f"Incompatible matrix sizes: {_format_shape(shape1)} vs {_format_shape(shape2)}"
        )


def _format_shape(shape: Tuple[int, ...]) -> str:
    return "x".join(str(n) for n in shape)
