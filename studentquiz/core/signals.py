"""
All signals used by StudentQuiz.

Signals are the main tools used for decoupling applications components by
sending notifications. In short, signals allow certain senders to notify
subscribers that something happened.

Cf. http://flask.pocoo.org/docs/signals/ for detailed documentation.
"""
from blinker import Namespace

signals = Namespace()

#: Triggered at application initialization when all extensions and blueprints
#: have been loaded
components_registered = signals.signal("app:components:registered")

#: Sent after a comment has been edited and its history recorded.
#: Receivers get `comment` (the model instance) and `user`.
comment_edited = signals.signal("studentquiz:comment:edited")

#: Sent when a teacher modifies a student's question.
question_changed = signals.signal("studentquiz:question:changed")
