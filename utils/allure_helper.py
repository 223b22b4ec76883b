"""
Allure 報告整合輔助
封裝截圖附件。
"""

import allure


def attach_screenshot(driver, name: str = "截圖") -> None:
    """將目前畫面截圖附加到 Allure 報告"""
    png = driver.get_screenshot_as_png()
    allure.attach(png, name=name, attachment_type=allure.attachment_type.PNG)
