"""Quiz and scoring constants shared across UI and core layers."""

OPTION_COUNT: int = 4
CORRECT_ANSWER_POINTS: int = 10
WRONG_ANSWER_POINTS: int = -2
FEEDBACK_WINDOW_MS: int = 2000

INTEGER_OPERAND_RANGE: tuple[int, int] = (-10, 10)
INTEGER_QUOTIENT_RANGE: tuple[int, int] = (-5, 4)
INTEGER_DISTRACTOR_OFFSET: int = 5
DISTRACTOR_MAX_ATTEMPTS: int = 100

INDIVIDUAL_QUICK_POINTS: tuple[int, ...] = (1, 5, -1)
BATCH_QUICK_POINTS: tuple[int, ...] = (5, 10)

APPRENTICE_SCORE_THRESHOLD: int = 20
EXPERT_SCORE_THRESHOLD: int = 50

# Tailwind-style tags kept for compatibility with session files from the web version.
AVATAR_COLORS: tuple[str, ...] = (
    "bg-red-400",
    "bg-orange-400",
    "bg-amber-400",
    "bg-yellow-400",
    "bg-lime-400",
    "bg-green-400",
    "bg-emerald-400",
    "bg-teal-400",
    "bg-cyan-400",
    "bg-sky-400",
    "bg-blue-400",
    "bg-indigo-400",
    "bg-violet-400",
    "bg-purple-400",
    "bg-fuchsia-400",
    "bg-pink-400",
    "bg-rose-400",
)

SESSION_FILENAME_TEMPLATE: str = "MathMaster_Sesion_{date}.json"
