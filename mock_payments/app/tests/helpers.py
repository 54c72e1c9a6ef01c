import base64

USER_ID = "bed66608-7b7f-4772-b646-b89cb6d7dc6b"


def basic_auth(username: str = "Secret_Username", password: str = "Secret_Password") -> dict[str, str]:
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return {"Authorization": f"Basic {token}"}


def payment_body(**overrides) -> dict:
    body = {
        "userId": USER_ID,
        "toAccountNumber": "111",
        "fromAccountNumber": "222",
        "amount": "150",
    }
    body.update(overrides)
    return body
