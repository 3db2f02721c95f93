"""
Core Package - Aggregation engine va cac utilities khong phu thuoc services.
"""
