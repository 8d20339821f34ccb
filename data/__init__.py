"""Static dictionary data"""
