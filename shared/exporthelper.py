from typing import Dict, List

import pandas as pd

from shared.core.schemas import ExportResponse


def export_rows(
    data: List[Dict],
    filename: str = "export.json",
    column_map: Dict[str, str] | None = None,
) -> ExportResponse:
    """
    Shape a list of row dicts into an export payload with friendly headers.

    Args:
        data: List of dictionaries (each dict = row)
        filename: Name suggested to the client for the download
        column_map: Mapping of data keys -> friendly column names, also the column order
    """
    if column_map:
        df = pd.DataFrame(data, columns=list(column_map.keys()))
        df = df.rename(columns=column_map)
    else:
        df = pd.DataFrame(data)

    # NaN is not valid JSON
    df = df.astype(object).where(pd.notnull(df), None)

    return ExportResponse(filename=filename, data=df.to_dict(orient="records"))
