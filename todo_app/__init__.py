"""
内存待办列表应用：集中式 Store + FastAPI 接口 + 控制台
"""
