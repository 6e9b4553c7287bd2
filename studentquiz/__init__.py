"""StudentQuiz comment area, as a Flask application.

Students comment on the questions of a StudentQuiz activity; comments are
edited through the `mod_studentquiz_edit_comment` web service.
"""
