class UsernameTakenError(Exception):
    def __init__(self, username: str):
        super().__init__(f'Username {username!r} is already taken')
        self.username = username


class InvalidCredentialsError(Exception):
    pass


class LoginRequiredError(Exception):
    pass


class AccessDeniedError(Exception):
    def __init__(self, required_role: str):
        super().__init__(f'{required_role} role required')
        self.required_role = required_role
