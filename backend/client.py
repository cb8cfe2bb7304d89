# backend/client.py
import requests

API = "http://localhost:8000/api/v1"  # adjust if running on docker-compose

SAMPLE = """## 英語
- 英単語の暗記（30分）優先度: 高
- リスニング練習 目標: リスニング力向上、毎日続ける
## 数学
1. 数学の問題演習（1.5時間）
"""

def test_health():
    r = requests.get(f"{API}/health")
    print("Health:", r.status_code, r.json())

def test_parse():
    r = requests.post(f"{API}/todos/parse", json={"content": SAMPLE})
    print("Parse:", r.status_code, r.json())

def test_records():
    r = requests.post(f"{API}/todos/records", json={"content": SAMPLE, "keys": ["0-0", "1-0"]})
    print("Records:", r.status_code, r.json())

def test_suggest():
    r = requests.post(f"{API}/ai/todo", json={"time_available": 60, "daily_goal": "英語"})
    print("Suggest:", r.status_code, r.json())

def test_heatmap():
    body = {"completed_at": ["2025-01-01T09:00:00", "2025-01-02T10:00:00"],
            "start": "2025-01-01", "end": "2025-01-07"}
    r = requests.post(f"{API}/activity/heatmap", json=body)
    print("Heatmap:", r.status_code, r.json())

if __name__ == "__main__":
    print("--- Testing FastAPI backend ---")
    test_health()
    test_parse()
    test_records()
    test_suggest()
    test_heatmap()
