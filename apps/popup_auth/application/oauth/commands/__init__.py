"""OAuth Commands.

팝업 OAuth 플로우 유스케이스(Command)입니다.
"""

from apps.popup_auth.application.oauth.commands.authorize import AuthorizeInteractor
from apps.popup_auth.application.oauth.commands.callback import CallbackInteractor

__all__ = ["AuthorizeInteractor", "CallbackInteractor"]
