"""Static metadata describing MathMaster 7."""

APP_NAME = "MathMaster 7"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "MathMaster 7 es una consola de aula para séptimo grado: lleva la tabla de "
    "clasificación, genera diagnósticos de enteros y fracciones, pide preguntas "
    "teóricas a Gemini y avisa cuando la clase está muy ruidosa."
)
SESSION_SUBTITLE = "Séptimo Grado - Diagnóstico Inicial"
