from .mixins.helpers import HelpersMixin
from .mixins.ha_api import HomeAssistantAPIMixin
from .mixins.checks import ChecksMixin
from .base import Base


class CheckHaState(
    HelpersMixin,
    HomeAssistantAPIMixin,
    ChecksMixin,
    Base,
):
    pass
