from .api_service import RealGameService
from .exceptions import GameServiceDecodeError, GameServiceError, GameServiceHTTPError
from .game_service import GameService, get_game_service
from .mock_service import MockGameService

__all__ = [
    "GameService",
    "GameServiceDecodeError",
    "GameServiceError",
    "GameServiceHTTPError",
    "MockGameService",
    "RealGameService",
    "get_game_service",
]
