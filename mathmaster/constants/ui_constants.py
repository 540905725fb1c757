"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "MathMaster 7"

NAV_BUTTON_SAVE: str = "Guardar"
NAV_BUTTON_LOAD: str = "Cargar"
NAV_BUTTON_EXIT_QUIZ: str = "Finalizar Actividad"
NAV_BUTTON_ABOUT: str = "Acerca de"

REGISTER_TITLE: str = "Nuevo Estudiante"
REGISTER_PLACEHOLDER: str = "Nombre del alumno..."
LEADERBOARD_TITLE: str = "Tabla de Clasificación"
LEADERBOARD_EMPTY: str = "No hay estudiantes registrados.\nAgrega uno nuevo o carga una sesión."
LEADERBOARD_TOTAL_TEMPLATE: str = "Total: {count}"
SELECTION_MODE_OFF: str = "Seleccionar Varios"
SELECTION_MODE_ON: str = "Multiselección"
BATCH_TITLE: str = "Acciones Grupales"
BATCH_SELECTED_TEMPLATE: str = "Seleccionados: {count}"
MANUAL_POINTS_PLACEHOLDER: str = "+/- pts"
MANUAL_POINTS_APPLY: str = "Aplicar"
EVALUATING_LABEL: str = "Evaluando a:"
START_ACTIVITY_LABEL: str = "Iniciar Actividad:"
EMPTY_SELECTION_HINT: str = (
    "Selecciona un estudiante de la tabla para iniciar el diagnóstico o asignar puntos."
)
CATEGORY_BUTTON_LABELS: dict[str, str] = {
    "INTEGERS": "1. Números Enteros",
    "FRACTIONS": "2. Fraccionarios",
    "THEORY": "3. Teoría y Conceptos",
}

QUIZ_TITLE: str = "Pregunta Diagnóstica"
QUIZ_LOADING: str = "Generando desafío..."
QUIZ_NEXT_HINT: str = "Próxima pregunta en breve..."
FEEDBACK_CORRECT_TEMPLATE: str = "¡EXCELENTE! +{points} Puntos"
FEEDBACK_WRONG_TEMPLATE: str = "INCORRECTO {points} Puntos"

NOISE_LEVEL_LABEL: str = "NIVEL DE RUIDO"
NOISE_SENSITIVITY_LABEL: str = "Sensibilidad"
NOISE_START_BUTTON: str = "Activar micrófono"
NOISE_STOP_BUTTON: str = "Apagar micrófono"
NOISE_WARNING_TITLE: str = "¡SILENCIO!"
NOISE_WARNING_TEXT: str = "La clase está muy ruidosa."
MICROPHONE_ERROR_MESSAGE: str = "No se pudo acceder al micrófono. Verifica los permisos."

SESSION_DIALOG_SAVE_TITLE: str = "Guardar sesión actual"
SESSION_DIALOG_LOAD_TITLE: str = "Cargar sesión guardada"
SESSION_FILE_FILTER: str = "Sesiones (*.json);;Todos los archivos (*.*)"
SESSION_LOADED_TEMPLATE: str = "Sesión cargada exitosamente. {count} estudiantes recuperados."
SESSION_BAD_FORMAT_MESSAGE: str = "El archivo no tiene el formato correcto."
SESSION_UNREADABLE_MESSAGE: str = (
    "Error al leer el archivo. Asegúrese de que sea un archivo JSON válido."
)
NO_STUDENT_FOCUSED_MESSAGE: str = "Selecciona primero un estudiante de la tabla."
