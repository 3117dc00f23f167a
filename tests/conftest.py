import os

# ハンドラーモジュールはインポート時に boto3 リソースを生成する
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "BookingTable")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "bus-booking")
