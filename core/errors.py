"""core/errors.py - 表达式求值的错误类型"""


class EvalError(Exception):
    """所有求值错误的基类

    Args:
        message: 可读的错误信息
        fragment: 出错的字符、数字文本、操作符或Token
        position: 出错位置（字符下标或Token下标），未知时为None
    """

    def __init__(self, message, fragment=None, position=None):
        super().__init__(message)
        self.message = message
        self.fragment = fragment
        self.position = position

    @property
    def kind(self):
        return type(self).__name__

    def to_dict(self):
        return {
            'kind': self.kind,
            'message': self.message,
            'fragment': self.fragment,
            'position': self.position,
        }


# 词法错误
class InvalidCharacter(EvalError, ValueError):
    pass


class InvalidNumber(EvalError, ValueError):
    pass


# 语法错误
class MismatchedParentheses(EvalError, ValueError):
    pass


class UnexpectedToken(EvalError, ValueError):
    pass


class UnexpectedTrailingInput(EvalError, ValueError):
    pass


class InvalidExpression(EvalError, ValueError):
    pass


class EmptyInput(EvalError, ValueError):
    pass


class ExpressionTooDeep(EvalError, ValueError):
    pass


# 求值错误
class InsufficientOperands(EvalError, ValueError):
    pass


class UnknownOperator(EvalError, ValueError):
    pass


class DivisionByZero(EvalError, ZeroDivisionError):
    pass
