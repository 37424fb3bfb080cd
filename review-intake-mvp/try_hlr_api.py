#!/usr/bin/env python3
"""
手动试用 Higher Level Review API 的示例脚本

使用方法:
1. 确保Django服务器正在运行: python manage.py runserver
2. 数据库里要有 file_number 对应的 Veteran
3. 运行此脚本: python try_hlr_api.py
"""

import json

import requests

# API配置
BASE_URL = "http://localhost:8000/api/v3/decision_review"


def build_payload(veteran_file_number, issues):
    return {
        "data": {
            "type": "HigherLevelReview",
            "attributes": {
                "receiptDate": "2019-07-10",
                "informalConference": True,
                "sameOffice": False,
                "legacyOptInApproved": True,
                "benefitType": "pension",
            },
            "relationships": {
                "veteran": {"data": {"type": "Veteran", "id": veteran_file_number}},
            },
        },
        "included": [{"type": "RequestIssue", "attributes": issue} for issue in issues],
    }


def print_errors(body):
    for error in body.get("errors", []):
        print(f"  - [{error['status']}] {error['code']}: {error['title']}")


def submit(veteran_file_number, issues):
    """POST 一个 review，打印结果，成功时返回 review id。"""
    print("\n" + "=" * 60)
    print(f"提交: veteran={veteran_file_number} issues={len(issues)}")
    print("=" * 60)

    url = f"{BASE_URL}/higher_level_reviews"
    print(f"请求URL: {url}")

    try:
        response = requests.post(url, json=build_payload(veteran_file_number, issues))
    except requests.exceptions.ConnectionError:
        print("\n❌ 连接错误: 无法连接到服务器")
        print("请确保Django服务器正在运行: python manage.py runserver")
        return None

    print(f"响应状态码: {response.status_code}")
    body = response.json()

    if response.status_code == 202:
        data = body["data"]
        print("\n✅ 创建成功!")
        print(f"  - Review ID: {data['id']}")
        print(f"  - Benefit type: {data['attributes']['benefitType']}")
        print(f"  - Request issues: {len(body['included'])}")
        return data["id"]

    if "errors" in body:
        print("\n❌ Intake 失败:")
        print_errors(body)
    else:
        print(f"\n❌ 请求失败: {body.get('code')} {body.get('message')}")
    return None


def fetch(review_id):
    """GET 一个 review 并打印。"""
    response = requests.get(f"{BASE_URL}/higher_level_reviews/{review_id}")
    print(f"\nGET 响应状态码: {response.status_code}")
    print(json.dumps(response.json(), indent=2, ensure_ascii=False))


def main():
    print("\n" + "=" * 60)
    print("Higher Level Review API 试用脚本")
    print("=" * 60)

    print("\n请输入 veteran file number（默认 64205050）:")
    veteran_file_number = input("> ").strip() or "64205050"

    review_id = submit(veteran_file_number, [
        {
            "contests": "other",
            "category": "Penalty Period",
            "decision_date": "2020-10-10",
            "decision_text": "Some text here.",
            "notes": "not sure if this is on file",
        },
    ])
    if review_id:
        fetch(review_id)

    # 一次返回全部 issue 错误
    submit(veteran_file_number, [
        {"contests": "the spherical nature of our planet"},
        {"contests": "on_file_rating_issue", "notes": "no id"},
    ])

    print("\n" + "=" * 60)
    print("完成")
    print("=" * 60)


if __name__ == "__main__":
    main()
