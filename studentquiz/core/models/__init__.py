from .comment import Comment, CommentHistory
from .course import Course, CourseModule, Enrolment, Question, StudentQuiz, \
    StudentQuizQuestion
from .subjects import User

__all__ = [
    "Comment",
    "CommentHistory",
    "Course",
    "CourseModule",
    "Enrolment",
    "Question",
    "StudentQuiz",
    "StudentQuizQuestion",
    "User",
]
