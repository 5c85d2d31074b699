"""
table2geojson.core - フィーチャ構築と変換処理を提供するモジュール
"""
