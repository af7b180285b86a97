"""Internationalisation strings for the trainer.

Usage::

    from chesstrainer.i18n import t, set_language

    set_language("Russian")
    print(t().btn_reset)                       # "Сбросить доску"
    print(t().status_you_played.format(san="e4"))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Review status line ───────────────────────────────────────────────
    status_board_ready: str
    status_mistake_shown: str  # "... {move}."
    status_better_move: str  # "... {move}."
    status_reset: str
    status_unlocked: str
    status_you_played: str  # "You played {san}."
    status_checkmate: str
    status_check: str
    status_stalemate: str
    status_draw: str
    status_illegal_move: str
    status_illegal_suggestion: str  # "... {move}"

    # Example-level (fatal) errors
    error_title: str
    error_invalid_before: str
    error_invalid_after: str
    error_inconsistent: str  # "... {move} ..."

    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_file: str
    menu_open_report: str
    menu_quit: str
    menu_settings: str
    menu_settings_action: str
    status_ready: str
    status_loaded_report: str  # "Loaded report: {name}"
    status_report_failed: str  # "Report error: {msg}"
    open_report_title: str
    open_report_failed: str  # "Failed to load report:\n{exc}"
    report_filter: str
    all_files: str
    no_report: str
    summary_title: str  # "... {player}"
    themes_header: str

    # ── ThemeCard / ExamplePanel ─────────────────────────────────────────
    theme_title: str  # "Theme: {title}"
    theme_examples: str
    example_move_number: str  # "Move {number}"
    example_analysis: str
    btn_show_mistake: str  # "... {move}"
    btn_show_better: str  # "... {move}"
    btn_reset: str
    btn_play: str

    # ── SettingsDialog ───────────────────────────────────────────────────
    settings_title: str
    settings_language: str
    settings_board_theme: str
    settings_show_coords: str
    settings_show_legal: str
    settings_strict: str


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    status_board_ready="Board is ready.",
    status_mistake_shown="This is the move you played: {move}.",
    status_better_move="A better move was {move}.",
    status_reset="Board has been reset.",
    status_unlocked="Board is unlocked. Play out the position!",
    status_you_played="You played {san}.",
    status_checkmate="Checkmate!",
    status_check="Check!",
    status_stalemate="Stalemate!",
    status_draw="Draw!",
    status_illegal_move="That's an illegal move.",
    status_illegal_suggestion="Error: AI suggested an illegal move: {move}",
    error_title="Error Loading Example",
    error_invalid_before="The AI provided an invalid board position (FEN) for this example.",
    error_invalid_after="Error: AI provided an invalid FEN for the resulting position.",
    error_inconsistent="Error: the AI's resulting position does not follow from {move}.",
    window_title="Chess AI Trainer",
    menu_file="&File",
    menu_open_report="&Open Report...",
    menu_quit="&Quit",
    menu_settings="&Settings",
    menu_settings_action="&Settings...",
    status_ready="Ready",
    status_loaded_report="Loaded report: {name}",
    status_report_failed="Report error: {msg}",
    open_report_title="Open Analysis Report",
    open_report_failed="Failed to load report:\n{exc}",
    report_filter="JSON Files (*.json)",
    all_files="All Files (*)",
    no_report="Open an analysis report to review your recurring mistakes.",
    summary_title="Grandmaster Summary for {player}",
    themes_header="Recurring Themes Analysis",
    theme_title="Theme: {title}",
    theme_examples="Examples from your games:",
    example_move_number="Move {number}",
    example_analysis="Analysis of this position",
    btn_show_mistake="Show My Mistake: {move}",
    btn_show_better="Show Better Move: {move}",
    btn_reset="Reset Board",
    btn_play="Play From Here",
    settings_title="Settings",
    settings_language="Language:",
    settings_board_theme="Board theme:",
    settings_show_coords="Show coordinates",
    settings_show_legal="Show legal moves",
    settings_strict="Reject examples whose resulting position does not match the move",
)

_RU = Strings(
    status_board_ready="Доска готова.",
    status_mistake_shown="Ваш ход в партии: {move}.",
    status_better_move="Лучше было сыграть {move}.",
    status_reset="Позиция восстановлена.",
    status_unlocked="Доска разблокирована. Играйте позицию!",
    status_you_played="Вы сыграли {san}.",
    status_checkmate="Мат!",
    status_check="Шах!",
    status_stalemate="Пат!",
    status_draw="Ничья!",
    status_illegal_move="Этот ход невозможен.",
    status_illegal_suggestion="Ошибка: ИИ предложил невозможный ход: {move}",
    error_title="Ошибка загрузки примера",
    error_invalid_before="ИИ выдал некорректную позицию (FEN) для этого примера.",
    error_invalid_after="Ошибка: ИИ выдал некорректный FEN для итоговой позиции.",
    error_inconsistent="Ошибка: итоговая позиция ИИ не получается ходом {move}.",
    window_title="Шахматный тренер",
    menu_file="&Файл",
    menu_open_report="&Открыть отчёт...",
    menu_quit="&Выход",
    menu_settings="&Настройки",
    menu_settings_action="&Настройки...",
    status_ready="Готово",
    status_loaded_report="Загружен отчёт: {name}",
    status_report_failed="Ошибка отчёта: {msg}",
    open_report_title="Открыть отчёт анализа",
    open_report_failed="Не удалось загрузить отчёт:\n{exc}",
    report_filter="Файлы JSON (*.json)",
    all_files="Все файлы (*)",
    no_report="Откройте отчёт анализа, чтобы разобрать повторяющиеся ошибки.",
    summary_title="Итоги гроссмейстера для {player}",
    themes_header="Повторяющиеся темы",
    theme_title="Тема: {title}",
    theme_examples="Примеры из ваших партий:",
    example_move_number="Ход {number}",
    example_analysis="Анализ позиции",
    btn_show_mistake="Моя ошибка: {move}",
    btn_show_better="Лучший ход: {move}",
    btn_reset="Сбросить доску",
    btn_play="Играть отсюда",
    settings_title="Настройки",
    settings_language="Язык:",
    settings_board_theme="Тема доски:",
    settings_show_coords="Показывать координаты",
    settings_show_legal="Показывать возможные ходы",
    settings_strict="Отклонять примеры, где итоговая позиция не совпадает с ходом",
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
