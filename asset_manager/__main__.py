from gevent import monkey  # isort:skip

monkey.patch_all()  # isort:skip

from asset_manager.main import main  # noqa: E402

if __name__ == "__main__":
    main()
