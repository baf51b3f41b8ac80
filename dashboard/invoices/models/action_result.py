'''Outcomes of invoice actions'''
from typing import Optional

class State:
    '''
    Failed action outcome to be rendered back into the form.
    `errors` maps field names to lists of messages, only invalid fields are there
    '''
    message: Optional[str]
    errors: dict[str, list[str]]

    def __init__(self, message: Optional[str]=None,
                 errors: Optional[dict[str, list[str]]]=None):
        self.message = message
        self.errors = errors or {}

    def __repr__(self):
        return f"<State: {self.message}>"

    def __eq__(self, other):
        return isinstance(other, State) \
            and self.message == other.message \
            and self.errors == other.errors

    def to_dict(self):
        return {
            'message': self.message,
            'errors': self.errors
        }

class Redirect:
    '''Successful action outcome. The caller has to navigate to `target`'''
    target: str

    def __init__(self, target: str):
        self.target = target

    def __repr__(self):
        return f"<Redirect: {self.target}>"

    def __eq__(self, other):
        return isinstance(other, Redirect) and self.target == other.target
