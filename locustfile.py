from locust import HttpUser, task, between
import random

WORDS = ["Économie", "running", "foo-bar", "Hello,", "World!", "jumps", "naïve"]


def generate_text():
    return " ".join(random.choice(WORDS) for _ in range(random.randint(5, 50)))


class TokenizeUser(HttpUser):
    wait_time = between(1, 2)

    @task(3)
    def tokenize_simple(self):
        self.client.post("/api/tokenize", json={"text": generate_text()})

    @task
    def tokenize_unicode61(self):
        self.client.post(
            "/api/tokenize",
            json={
                "text": generate_text(),
                "tokenizer": {
                    "name": "unicode61",
                    "remove_diacritics": False,
                    "token_characters": "-",
                },
            },
        )
