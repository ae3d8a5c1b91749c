"""Controllers sitting between the engine and the presentation layers."""

from bracketschedule.controllers.schedule_controller import (
    GameView,
    RefreshResult,
    ScheduleController,
    ScoreEditResult,
)

__all__ = ["GameView", "RefreshResult", "ScheduleController", "ScoreEditResult"]
