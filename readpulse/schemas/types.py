from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator

from readpulse.timezones import to_utc

# Columns hold naive UTC; responses carry the offset explicitly
UtcDatetime = Annotated[datetime, AfterValidator(to_utc)]
