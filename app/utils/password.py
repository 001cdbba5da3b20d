"""비밀번호 해싱 유틸리티.

Password hashing helpers backed by bcrypt.
"""

import bcrypt


def hash_password(password: str) -> str:
    """평문 비밀번호를 bcrypt 해시로 변환합니다 (Salted bcrypt hash)."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """평문 비밀번호가 저장된 해시와 일치하는지 확인합니다.

    Args:
        plain_password: 로그인 시 입력한 비밀번호
        hashed_password: users.password_hash 값

    Returns:
        bool: 일치 여부 (True when the password matches)
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # 손상된 해시 문자열 (Malformed stored hash)
        return False
