"""
Sales app: point-of-sale recording and the sale engine that keeps stock consistent.
"""
