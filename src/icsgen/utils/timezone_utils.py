"""Timezone utilities for the application."""

from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from dateutil import tz

from icsgen.exceptions import ConfigError

UTC = ZoneInfo("UTC")

class TimezoneManager:
    """Manages the local/UTC distinction used when rendering dates."""
    
    def __init__(self, local_timezone: str | None = None):
        """Initialize timezone manager.
        
        Args:
            local_timezone: IANA name of the local timezone. When omitted the
                system local timezone is used.
            
        Raises:
            ConfigError: If the timezone is invalid
        """
        self.set_timezone(local_timezone)
    
    def set_timezone(self, timezone: str | None) -> None:
        """Set the local timezone.
        
        Args:
            timezone: IANA timezone name, or None for the system timezone
            
        Raises:
            ConfigError: If the timezone is invalid
        """
        self.utc_tz = UTC
        if not timezone:
            self.local_tz: tzinfo = tz.tzlocal()
            return
        try:
            self.local_tz = ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigError(f"Invalid timezone {timezone}", {"error": str(e)}) from e
    
    def localize_datetime(self, dt: datetime) -> datetime:
        """Attach the local timezone to a naive datetime, or convert an aware one."""
        if dt.tzinfo is None:
            return dt.replace(tzinfo=self.local_tz)
        return dt.astimezone(self.local_tz)
        
    def utc_now(self) -> datetime:
        """Get current time in UTC."""
        return datetime.now(self.utc_tz)
    
    @property
    def timezone_name(self) -> str:
        """Get the name of the local timezone."""
        return str(getattr(self.local_tz, 'key', None) or datetime.now(self.local_tz).tzname())
    
    @staticmethod
    def is_valid_timezone(timezone: str) -> bool:
        """Check if a timezone name is valid."""
        return timezone in available_timezones()
