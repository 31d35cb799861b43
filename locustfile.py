from locust import HttpUser, task, between
import random

SAMPLE_TEXTS = [
    "Atendimento excelente, muito rápido",
    "Produto quebrou na primeira semana",
    "Achei muito caro pelo que entrega",
    "Gostei bastante, recomendo",
    "Não gostei do suporte",
    "O pedido chegou ontem",
]


def generate_texts():
    return random.choices(SAMPLE_TEXTS, k=random.randint(10, 100))


def generate_responses():
    return [
        {"id": str(i), "text": text, "rating": random.randint(1, 5)}
        for i, text in enumerate(generate_texts())
    ]


class AnalyticsUser(HttpUser):
    wait_time = between(1, 2)

    @task(3)
    def sentiment_batch(self):
        self.client.post("/api/sentiment/", json={"texts": generate_texts()})

    @task(2)
    def thematic_batch(self):
        self.client.post("/api/sentiment/thematic", json={"texts": generate_texts()})

    @task(1)
    def survey_analysis(self):
        self.client.post(
            "/api/analytics/survey", json={"responses": generate_responses(), "k": 3}
        )
