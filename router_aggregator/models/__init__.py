"""
路由分类数据模型：链、代币、路由节点
"""
