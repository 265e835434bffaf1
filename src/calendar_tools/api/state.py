from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..services import CalendarProvider, CalendarService, ServiceContext


@dataclass(slots=True)
class ApiState:
    context: ServiceContext = field(default_factory=ServiceContext)
    calendar: CalendarService = field(init=False)

    def __post_init__(self) -> None:
        self.calendar = CalendarService(self.context)

    def install_provider(self, provider: Optional[CalendarProvider]) -> None:
        self.context.provider = provider


api_state = ApiState()
