"""
Matrix loader for IEDS Calculator

CSV形式の利得表を読み込み、整数行列・PayoffMatricesを構築
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Union

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from .exceptions import MatrixLoadError
from .matrix import PayoffMatrices

MatrixSource = Union[str, Path, IO[str], IO[bytes]]

_INT64 = np.iinfo(np.int64)


def _source_name(source: MatrixSource) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return str(getattr(source, "name", "<buffer>"))


def _parse_cell(value: object, source: str, cell: tuple[int, int]) -> int:
    """セル文字列を整数に変換（空欄・非整数・int64の範囲外はエラー）"""
    if value is None or (isinstance(value, float) and np.isnan(value)):
        raise MatrixLoadError(source, "missing cell (rows have different lengths)", cell)

    text = str(value).strip()
    if not text:
        raise MatrixLoadError(source, "empty cell", cell)

    try:
        number = int(text)
    except ValueError:
        raise MatrixLoadError(source, f"not an integer: {text!r}", cell) from None

    if not _INT64.min <= number <= _INT64.max:
        raise MatrixLoadError(source, f"out of range: {text}", cell)
    return number


def load_matrix(source: MatrixSource) -> NDArray[np.int64]:
    """
    CSVから利得行列を読み込む

    Args:
        source: ファイルパス、またはファイルライクオブジェクト
               （'#'で始まる行はコメントとして無視）

    Returns:
        整数行列（R×C）

    Raises:
        MatrixLoadError: 読み込めない、空、行の長さが不揃い、整数でない・範囲外のセルがある場合
    """
    name = _source_name(source)

    try:
        table = pd.read_csv(
            source,
            header=None,
            dtype=str,
            comment="#",
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        raise MatrixLoadError(name, "no data") from None
    except pd.errors.ParserError as e:
        raise MatrixLoadError(name, f"malformed table ({e})") from None
    except (OSError, UnicodeDecodeError) as e:
        raise MatrixLoadError(name, str(e)) from None

    if table.empty:
        raise MatrixLoadError(name, "no data")

    n_rows, n_cols = table.shape
    matrix = np.zeros((n_rows, n_cols), dtype=np.int64)
    for i in range(n_rows):
        for j in range(n_cols):
            matrix[i, j] = _parse_cell(table.iat[i, j], name, (i, j))

    return matrix


def parse_matrix_text(text: str, name: str = "<text>") -> NDArray[np.int64]:
    """CSV文字列から利得行列を読み込む"""
    buffer = io.StringIO(text)
    buffer.name = name
    return load_matrix(buffer)


def load_game(
    source1: MatrixSource,
    source2: MatrixSource | None = None
) -> PayoffMatrices:
    """
    1つまたは2つのCSVからゲームを構築

    Args:
        source1: プレイヤー1の利得行列
        source2: プレイヤー2の利得行列（Noneなら対称ゲーム = source1の転置）

    Raises:
        MatrixLoadError: 読み込みに失敗した場合
        IncompatibleMatricesError: 行列サイズが一致しない場合
    """
    matrix1 = load_matrix(source1)
    if source2 is None:
        return PayoffMatrices.symmetric(matrix1)

    matrix2 = load_matrix(source2)
    return PayoffMatrices(matrix1=matrix1, matrix2=matrix2)
