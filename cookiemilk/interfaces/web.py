"""
web.py - HTTP interface for the cookies & milk game

Exposes the shared game over four plain-text endpoints. Handlers are plain
functions, so FastAPI runs them in its threadpool and the shared game's
lock is never held across an await.
"""

from typing import Optional

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.responses import PlainTextResponse, Response

from cookiemilk.debug import debug
from cookiemilk.game.shared import SharedGame, InvalidMoveError, parse_team, parse_column

game_router = APIRouter(prefix="/12", default_response_class=PlainTextResponse)


def get_game(request: Request) -> SharedGame:
    return request.app.state.game


class GameAPI:
    @staticmethod
    @game_router.get("/board")
    def board(request: Request) -> PlainTextResponse:
        return PlainTextResponse(get_game(request).view())

    @staticmethod
    @game_router.post("/reset")
    def reset(request: Request) -> PlainTextResponse:
        debug.info("Resetting board", "web")
        return PlainTextResponse(get_game(request).reset())

    @staticmethod
    @game_router.post("/place/{team}/{column}")
    def place(request: Request, team: str, column: str) -> Response:
        """Drop a piece for a team into a 1-based column

        Args:
            team (str): "cookie" or "milk"
            column (str): Column number from 1 to 4

        Returns:
            Response: 200 with the board, 400 for a bad team or column,
                503 with the unchanged board when the move is unavailable
        """
        try:
            tile = parse_team(team)
            index = parse_column(column)
        except InvalidMoveError as e:
            debug.debug(f"Rejected place request: {e}", "web")
            return Response(status_code=status.HTTP_400_BAD_REQUEST)

        outcome = get_game(request).place(tile, index)
        if outcome.status.is_unavailable():
            return PlainTextResponse(
                outcome.board, status_code=status.HTTP_503_SERVICE_UNAVAILABLE
            )
        return PlainTextResponse(outcome.board)

    @staticmethod
    @game_router.get("/random-board")
    def random_board(request: Request) -> PlainTextResponse:
        return PlainTextResponse(get_game(request).randomize())


def create_app(game: Optional[SharedGame] = None) -> FastAPI:
    """Build the application around a single shared game."""
    app = FastAPI(title="cookiemilk")
    app.state.game = game if game is not None else SharedGame()
    app.include_router(game_router)
    return app
