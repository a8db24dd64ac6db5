
class MaltError(Exception):
    """ Base class for all malt errors"""
    pass

class MaltParseError(MaltError):
    """ Raised when source text cannot be read into a form"""

class MaltInvalidSymbol(MaltError):
    """ Raised when something other than a Symbol is used as a binding name"""

class MaltUnboundSymbol(MaltError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name):
        super().__init__(f"'{name}' not found")
        self.name = name

class MaltArityError(MaltError):
    """ Raised when the number of arguments passed to a form or function is incorrect"""

class MaltTypeError(MaltError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class MaltMalformedSpecialForm(MaltError):
    """ Raised when a special form's arguments have the wrong shape"""

class MaltNotCallable(MaltError):
    """ Raised when the head of an application is not a function"""

class MaltDivisionByZero(MaltError):
    """ Raised when / is given a zero divisor"""
