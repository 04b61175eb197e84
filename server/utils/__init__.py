# -*- coding: utf-8 -*-
"""
服务器工具模块
"""
