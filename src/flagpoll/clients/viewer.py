from .base import FlagView

LOADING_TEXT = "Loading..."
ON_TEXT = "New feature is on!\nYou see this because the service said \"true\"."
OFF_TEXT = "No new features here.\nYou see this because the service said \"false\"."


class ViewerClient(FlagView):
    """Read-only client: shows one of two branches depending on the flag."""

    @property
    def loading(self) -> bool:
        return not self.poller.settled

    def render(self) -> str:
        if self.loading:
            return LOADING_TEXT
        return ON_TEXT if self.flag else OFF_TEXT
