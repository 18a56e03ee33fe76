import asyncio
import time
import random
import statistics
from typing import Dict, List

import httpx
from faker import Faker

fake = Faker()
BASE_URL = "http://localhost:8080"


async def create_team(client: httpx.AsyncClient) -> int:
    """Создать команду со случайным названием."""
    response = await client.post(f"{BASE_URL}/teams", json={"name": fake.unique.company()})
    response.raise_for_status()
    return response.json()["team"]["teamId"]


async def create_member(client: httpx.AsyncClient, team_id: int | None) -> int:
    """Создать участника со случайным именем и возрастом."""
    response = await client.post(
        f"{BASE_URL}/members",
        json={"username": fake.user_name(), "age": random.randint(0, 99), "teamId": team_id},
    )
    response.raise_for_status()
    return response.json()["member"]["memberId"]


def random_condition(team_names: List[str]) -> Dict[str, str | int]:
    """Случайное подмножество полей условия поиска."""
    params: Dict[str, str | int] = {}
    if team_names and random.random() < 0.5:
        params["teamName"] = random.choice(team_names)
    if random.random() < 0.5:
        params["ageGoe"] = random.randint(0, 50)
    if random.random() < 0.5:
        params["ageLoe"] = random.randint(50, 99)
    return params


class RequestStats:
    def __init__(self, label: str):
        self.label = label
        self.count = 0
        self.server_errors = 0
        self.response_times: List[float] = []
        self.error_details: Dict[str, int] = {}

    def record_success(self, duration_ms: float):
        self.count += 1
        self.response_times.append(duration_ms)

    def record_error(self, error_type: str = "Unknown", http_status_code: int | None = None):
        self.count += 1
        self.error_details[error_type] = self.error_details.get(error_type, 0) + 1
        if http_status_code and 500 <= http_status_code < 600:
            self.server_errors += 1

    def print_results(self, test_duration: int):
        if self.count == 0:
            print(f"\nРезультаты {self.label}: Нет данных.")
            return

        print(f"\nРезультаты {self.label}:")
        print(f"  Всего запросов: {self.count}")
        print(f"  Ошибок (5xx): {self.server_errors}")
        print(f"  Успешность (без 5xx): {(self.count - self.server_errors) / self.count * 100:.2f}%")
        print(f"  RPS: {self.count / test_duration:.2f}")

        if self.response_times:
            sorted_times = sorted(self.response_times)
            p50 = sorted_times[len(sorted_times) // 2]
            p95 = sorted_times[int(len(sorted_times) * 0.95)]
            print(
                f"  Время ответа (мс): среднее={statistics.mean(sorted_times):.2f}, "
                f"P50={p50:.2f}, P95={p95:.2f}, макс={sorted_times[-1]:.2f}"
            )


async def _execute_search(
    client: httpx.AsyncClient, version: str, team_names: List[str], stats: RequestStats
):
    """Выполнить один поисковый запрос и записать статистику."""
    req_start = time.time()
    params = random_condition(team_names)
    if version != "v1":
        params["page"] = random.randint(0, 5)
        params["size"] = random.choice([10, 20, 50])
    try:
        response = await client.get(f"{BASE_URL}/{version}/members", params=params)
        response.raise_for_status()
        stats.record_success((time.time() - req_start) * 1000)
    except httpx.HTTPStatusError as e:
        stats.record_error(f"HTTP_ERROR_{e.response.status_code}", e.response.status_code)
    except httpx.HTTPError as e:
        stats.record_error(type(e).__name__)


async def run_load_test(
    num_teams: int = 5,
    members_per_team: int = 100,
    concurrency: int = 30,
    test_duration: int = 60,
):
    print("Нагрузочное тестирование поиска:")
    print(f"  Команд: {num_teams}, участников на команду: {members_per_team}")
    print(f"  Параллельных запросов на версию: {concurrency}")
    print(f"  Длительность теста: {test_duration}с\n")

    async with httpx.AsyncClient(timeout=30.0) as client:
        team_names = []
        for _ in range(num_teams):
            team_id = await create_team(client)
            response = await client.get(f"{BASE_URL}/teams/{team_id}")
            team_names.append(response.json()["team"]["name"])
            for _ in range(members_per_team):
                await create_member(client, team_id)

        all_stats = {version: RequestStats(f"/{version}/members") for version in ("v1", "v2", "v3")}
        end_time = time.time() + test_duration

        async def worker(version: str):
            while time.time() < end_time:
                await _execute_search(client, version, team_names, all_stats[version])
                await asyncio.sleep(0.01)

        await asyncio.gather(
            *[worker(version) for version in all_stats for _ in range(concurrency)]
        )

        for stats in all_stats.values():
            stats.print_results(test_duration)


if __name__ == "__main__":
    asyncio.run(run_load_test())
