"""Submission - 이미지 점수 산정 및 저장."""
