from .feature_flag import (
    DEFAULT_FLAG_KEY as DEFAULT_FLAG_KEY,
    FlagUpdate as FlagUpdate,
    HealthStatus as HealthStatus,
    FlagsResponse as FlagsResponse,
    FlagUpdateResponse as FlagUpdateResponse,
)
