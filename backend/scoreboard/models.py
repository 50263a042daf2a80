from dataclasses import dataclass

SCORE_KEY_PREFIX = 'user:'
SCORE_KEY_PATTERN = SCORE_KEY_PREFIX + '*'


def score_key(username: str) -> str:
    return f'{SCORE_KEY_PREFIX}{username}'


def cards_key(username: str) -> str:
    return f'game:{username}:cards'


def username_from_score_key(key: str) -> str:
    return key[len(SCORE_KEY_PREFIX):]


@dataclass
class PlayerScore:
    username: str
    score: int

    def to_dict(self):
        return {
            'username': self.username,
            'score': self.score,
        }
