"""Internationalisation strings shared by the console and Qt frontends.

Usage::

    from breakthrough.ui.i18n import t, set_language

    set_language("Russian")
    print(t().menu_new_game)          # "Новая игра"
    print(describe_error(WrongOwnerError()))
"""

from __future__ import annotations

from dataclasses import dataclass

from breakthrough.core.enums import Side
from breakthrough.core.errors import (
    BlockedBySelfError,
    BlockedStraightMoveError,
    EmptySourceError,
    GameOverError,
    IllegalMoveError,
    OutOfBoundsError,
    TooWideStepError,
    WrongDirectionError,
    WrongOwnerError,
)
from breakthrough.game.interfaces import GameEndReason


@dataclass(frozen=True)
class Strings:
    app_title: str
    color_white: str
    color_black: str

    # ── Main menu (console) ──────────────────────────────────────────────
    menu_new_game: str
    menu_how_to_play: str
    menu_scores: str
    menu_exit: str
    menu_unknown: str
    prompt_white_name: str
    prompt_black_name: str
    press_enter: str

    # ── Game loop (console) ──────────────────────────────────────────────
    status_turn: str  # "Turn: {name} ({side})   |   Plies: {ply}"
    commands_hint: str
    move_hint: str
    moves_available: str  # "Available moves: {count}"
    moves_truncated: str  # "... (first {shown} shown)"
    saved_to: str  # "Saved to: {path}"
    save_failed: str  # "Save failed: {msg}"
    loaded_from: str  # "Loaded from: {path}"
    load_failed: str  # "Load failed: {msg}"
    victory: str  # "Victory! {name} ({side}) wins."
    plies_played: str  # "Plies played: {ply}"
    result_recorded: str  # "Result added to the scoreboard ({path})."
    result_failed: str  # "Could not record the result: {msg}"

    # Input errors
    input_need_two: str
    input_bad_coordinate: str  # "Cannot read coordinate: {token} (e.g. a2)"

    # ── Help ─────────────────────────────────────────────────────────────
    help_lines: tuple[str, ...]

    # ── Scoreboard ───────────────────────────────────────────────────────
    scores_header: str
    scores_empty: str
    score_line: str  # "{rank:2}. {winner} ({side}) beat {loser} | plies: {ply} | {date} UTC"

    # ── Game over ────────────────────────────────────────────────────────
    game_over_title: str
    wins_far_edge: str  # "{name} ({side}) wins by reaching the far edge."
    wins_eliminated: str
    wins_blockade: str

    # ── Illegal moves ────────────────────────────────────────────────────
    err_out_of_bounds: str
    err_empty_source: str
    err_wrong_owner: str
    err_wrong_direction: str
    err_too_wide: str
    err_blocked_by_self: str
    err_blocked_straight: str
    err_game_over: str

    # ── Main window (Qt) ─────────────────────────────────────────────────
    menu_game: str
    menu_open: str
    menu_save: str
    menu_language: str
    menu_quit: str
    menu_view: str
    menu_flip_board: str
    menu_show_coordinates: str
    menu_theme: str
    theme_classic: str
    theme_green: str
    illegal_move_title: str
    json_filter: str
    open_title: str
    save_title: str
    scores_title: str
    scores_col_rank: str
    scores_col_winner: str
    scores_col_side: str
    scores_col_loser: str
    scores_col_plies: str
    scores_col_date: str
    new_game_title: str
    new_game_white_name: str
    new_game_black_name: str


_EN = Strings(
    app_title="Breakthrough",
    color_white="White",
    color_black="Black",
    menu_new_game="New game",
    menu_how_to_play="How to play",
    menu_scores="Scoreboard",
    menu_exit="Exit",
    menu_unknown="Unknown choice. Press Enter and try again.",
    prompt_white_name="Name of the White player (bottom, moves up): ",
    prompt_black_name="Name of the Black player (top, moves down): ",
    press_enter="Press Enter...",
    status_turn="Turn: {name} ({side})   |   Plies: {ply}",
    commands_hint="Commands: :menu, :exit, :help, :moves, :save [file], :load [file], :scores",
    move_hint="Move: e.g.  a2 a3",
    moves_available="Available moves: {count}",
    moves_truncated="... (first {shown} shown)",
    saved_to="Saved to: {path}",
    save_failed="Save failed: {msg}",
    loaded_from="Loaded from: {path}",
    load_failed="Load failed: {msg}",
    victory="Victory! {name} ({side}) wins.",
    plies_played="Plies played: {ply}",
    result_recorded="Result added to the scoreboard ({path}).",
    result_failed="Could not record the result: {msg}",
    input_need_two="Two coordinates are needed, e.g.  a2 a3",
    input_bad_coordinate="Cannot read coordinate: {token} (e.g. a2)",
    help_lines=(
        "Rules (short):",
        "- A piece moves one square forward, straight or diagonally, into an empty square.",
        "- A piece captures one square diagonally forward (enemy pieces only).",
        "- Win by bringing any piece to the opposite edge of the board,",
        "  by capturing every enemy piece, or by leaving the opponent without a move.",
        "",
        "Move input: a2 a3",
        "Commands:",
        "- :menu",
        "- :exit",
        "- :help",
        "- :moves",
        "- :save [file.json] (default save.json)",
        "- :load [file.json] (default save.json)",
        "- :scores (scoreboard)",
    ),
    scores_header="=== Scoreboard (fewer plies is better) ===",
    scores_empty="No results yet.",
    score_line="{rank:2}. {winner} ({side}) beat {loser} | plies: {ply} | {date} UTC",
    game_over_title="Game over",
    wins_far_edge="{name} ({side}) wins by reaching the far edge.",
    wins_eliminated="{name} ({side}) wins by capturing every enemy piece.",
    wins_blockade="{name} ({side}) wins: the opponent has no legal move.",
    err_out_of_bounds="Coordinates are outside the board.",
    err_empty_source="There is no piece on the source square.",
    err_wrong_owner="That piece does not belong to you.",
    err_wrong_direction="Pieces may only move one row forward.",
    err_too_wide="A piece moves only to an adjacent square (straight or diagonal).",
    err_blocked_by_self="The destination is occupied by your own piece.",
    err_blocked_straight="A straight move needs an empty square. Capture diagonally instead.",
    err_game_over="The game is already over.",
    menu_game="&Game",
    menu_open="&Open…",
    menu_save="&Save…",
    menu_language="&Language",
    menu_quit="&Quit",
    menu_view="&View",
    menu_flip_board="&Flip board",
    menu_show_coordinates="Show &coordinates",
    menu_theme="Board &theme",
    theme_classic="Classic",
    theme_green="Green",
    illegal_move_title="Illegal move",
    json_filter="Saved games (*.json)",
    open_title="Open game",
    save_title="Save game",
    scores_title="Scoreboard",
    scores_col_rank="#",
    scores_col_winner="Winner",
    scores_col_side="Side",
    scores_col_loser="Loser",
    scores_col_plies="Plies",
    scores_col_date="Date (UTC)",
    new_game_title="New game",
    new_game_white_name="White:",
    new_game_black_name="Black:",
)

_RU = Strings(
    app_title="Прорыв",
    color_white="Белые",
    color_black="Чёрные",
    menu_new_game="Новая игра",
    menu_how_to_play="Как играть",
    menu_scores="Таблица рекордов",
    menu_exit="Выход",
    menu_unknown="Не понял. Нажмите Enter и попробуйте снова.",
    prompt_white_name="Имя игрока за белых (снизу, ходит вверх): ",
    prompt_black_name="Имя игрока за чёрных (сверху, ходит вниз): ",
    press_enter="Нажмите Enter...",
    status_turn="Ход: {name} ({side})   |   Ходов: {ply}",
    commands_hint="Команды: :menu, :exit, :help, :moves, :save [файл], :load [файл], :scores",
    move_hint="Ход: например  a2 a3",
    moves_available="Доступных ходов: {count}",
    moves_truncated="... (показаны первые {shown})",
    saved_to="Сохранено в файл: {path}",
    save_failed="Ошибка сохранения: {msg}",
    loaded_from="Загружено из файла: {path}",
    load_failed="Ошибка загрузки: {msg}",
    victory="Победа! Победил: {name} ({side})",
    plies_played="Ходов (полуходов): {ply}",
    result_recorded="Результат добавлен в таблицу рекордов ({path}).",
    result_failed="Не удалось записать рекорд: {msg}",
    input_need_two="Нужно 2 координаты: например  a2 a3",
    input_bad_coordinate="Не понял координату: {token} (пример: a2)",
    help_lines=(
        "Правила (кратко):",
        "- Фишки ходят на 1 клетку вперёд или по диагонали (только в пустую).",
        "- Бьют на 1 клетку по диагонали вперёд (только фигуру соперника).",
        "- Победа: провести любую фишку на противоположную сторону доски,",
        "  взять все фишки соперника или оставить его без ходов.",
        "",
        "Ввод хода: a2 a3",
        "Команды:",
        "- :menu",
        "- :exit",
        "- :help",
        "- :moves",
        "- :save [file.json] (по умолчанию save.json)",
        "- :load [file.json] (по умолчанию save.json)",
        "- :scores (таблица рекордов)",
    ),
    scores_header="=== Таблица рекордов (меньше ходов — лучше) ===",
    scores_empty="Рекордов пока нет.",
    score_line="{rank:2}. {winner} ({side}) победил {loser} | ходов: {ply} | {date} UTC",
    game_over_title="Игра окончена",
    wins_far_edge="{name} ({side}) побеждает, дойдя до края доски.",
    wins_eliminated="{name} ({side}) побеждает, взяв все фишки соперника.",
    wins_blockade="{name} ({side}) побеждает: у соперника нет ходов.",
    err_out_of_bounds="Координаты вне доски.",
    err_empty_source="В исходной клетке нет фишки.",
    err_wrong_owner="Это не ваша фишка.",
    err_wrong_direction="Фишки могут ходить только вперёд на один ряд.",
    err_too_wide="Фишка ходит только на соседние клетки (прямо или по диагонали).",
    err_blocked_by_self="Клетка занята вашей фигурой.",
    err_blocked_straight="Вперёд можно ходить только в пустую клетку. Для взятия используйте диагональ.",
    err_game_over="Игра уже окончена.",
    menu_game="&Игра",
    menu_open="&Открыть…",
    menu_save="&Сохранить…",
    menu_language="&Язык",
    menu_quit="&Выход",
    menu_view="&Вид",
    menu_flip_board="&Перевернуть доску",
    menu_show_coordinates="Показывать &координаты",
    menu_theme="&Тема доски",
    theme_classic="Классическая",
    theme_green="Зелёная",
    illegal_move_title="Недопустимый ход",
    json_filter="Сохранённые игры (*.json)",
    open_title="Открыть игру",
    save_title="Сохранить игру",
    scores_title="Таблица рекордов",
    scores_col_rank="№",
    scores_col_winner="Победитель",
    scores_col_side="Сторона",
    scores_col_loser="Проигравший",
    scores_col_plies="Ходов",
    scores_col_date="Дата (UTC)",
    new_game_title="Новая игра",
    new_game_white_name="Белые:",
    new_game_black_name="Чёрные:",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)


def side_name(side: Side) -> str:
    s = t()
    return s.color_white if side == Side.WHITE else s.color_black


# Most specific classes first: TooWideStepError is a WrongDirectionError.
_ERROR_FIELDS: tuple[tuple[type[IllegalMoveError], str], ...] = (
    (OutOfBoundsError, "err_out_of_bounds"),
    (EmptySourceError, "err_empty_source"),
    (WrongOwnerError, "err_wrong_owner"),
    (TooWideStepError, "err_too_wide"),
    (WrongDirectionError, "err_wrong_direction"),
    (BlockedBySelfError, "err_blocked_by_self"),
    (BlockedStraightMoveError, "err_blocked_straight"),
    (GameOverError, "err_game_over"),
)


def describe_error(error: IllegalMoveError) -> str:
    """Localised reason for a rejected move."""
    for cls, attr in _ERROR_FIELDS:
        if isinstance(error, cls):
            return getattr(t(), attr)
    return str(error)


def describe_win(name: str, side: Side, reason: GameEndReason) -> str:
    s = t()
    template = {
        GameEndReason.REACHED_FAR_EDGE: s.wins_far_edge,
        GameEndReason.ELIMINATED: s.wins_eliminated,
        GameEndReason.BLOCKADE: s.wins_blockade,
    }.get(reason, s.victory)
    return template.format(name=name, side=side_name(side))
