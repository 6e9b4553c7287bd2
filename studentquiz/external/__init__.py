"""Web service functions of StudentQuiz."""
