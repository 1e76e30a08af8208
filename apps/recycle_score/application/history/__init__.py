"""History - 주소별 누적 점수 조회."""
