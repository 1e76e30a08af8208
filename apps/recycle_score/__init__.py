"""Recycle Score API - 이미지 재활용 점수 산정 및 주소별 집계."""
