from datetime import date, datetime, timezone


def parse_release_date(value: object) -> datetime:
    """把请求中的上映日期转换为 datetime

    只接受 ISO-8601 格式:
      - 日期: "2021-10-22"
      - 日期时间: "2021-10-22T18:00:00"、"2021-10-22 18:00"
      - 带时区: "2021-10-22T18:00:00Z"、"2021-10-22T18:00:00-03:00"（转为 UTC 后去掉时区）
    "2021"、"Oct 22, 2021" 这类自由格式会被拒绝。

    Raises:
        ValueError: 无法解析的日期字符串
        TypeError: 不支持的类型
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise TypeError(f"Unsupported date-like value: {type(value)}")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
