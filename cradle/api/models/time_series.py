"""Market time series (OHLCV) record."""

from pydantic import BaseModel, ConfigDict

from ..core.enums import DataProviderType, TimeSeriesInterval


class TimeSeriesRecord(BaseModel):
    id: str
    market_id: str
    asset: str
    open: str
    high: str
    low: str
    close: str
    volume: str
    start_time: str
    end_time: str
    interval: TimeSeriesInterval
    data_provider_type: DataProviderType
    data_provider: str

    model_config = ConfigDict(frozen=True, extra="allow")
