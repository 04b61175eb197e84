# -*- coding: utf-8 -*-
"""干支历法计算：农历转换、四柱、小六壬"""
