"""驻留表核心。"""
